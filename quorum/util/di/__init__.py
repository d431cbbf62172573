"""Dependency injection module."""

from typing import Type

from quorum.util.di.application import ProdApplicationProvider
from quorum.util.di.base import Component, ProviderBase
from quorum.util.di.core import ProdConfigProvider
from quorum.util.di.domain import ProdDomainProvider
from quorum.util.di.infrastructure import (
    LiveProvider,
    PersistenceProvider,
    ProdLiveProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    LiveProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a PROVIDERS entry.

    Concrete providers are returned unchanged; mockable components resolve
    to their mock or production subclass.

    Raises:
        ValueError: If the requested implementation is not defined
    """
    if not base.is_mockable():
        return base
    return base.implementation(use_mock)


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "LiveProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdLiveProvider",
    "ProdPersistenceProvider",
]
