"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Infrastructure that tests can swap for in-process fakes
Component = Literal["live", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a mockable component: its subclasses
    are the production and mock implementations, told apart by __is_mock__.
    A provider class without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether implementations of this provider can be swapped."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> Type["ProviderBase"]:
        """Pick the mock or production subclass of a mockable component.

        Raises:
            ValueError: If no matching implementation is defined
        """
        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
