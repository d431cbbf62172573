"""Infrastructure providers."""

# Import bases
from .live import LiveProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .live import ProdLiveProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "LiveProvider",
    "PersistenceProvider",
    "ProdLiveProvider",
    "ProdPersistenceProvider",
]
