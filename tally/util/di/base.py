"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

from tally.util.error import ConfigurationError

# Components that have an alternative implementation for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a swappable component: the subclasses
    are its production and mock implementations, told apart by __is_mock__.
    A provider class without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Provider class to instantiate for this component.

        Mock implementations register themselves by subclassing, so the mock
        module has to be imported before calling this with use_mock=True.

        Raises:
            ConfigurationError: If the requested implementation is missing
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ConfigurationError(
            f"No {kind} provider for the {cls.__mock_component__} component"
        )
