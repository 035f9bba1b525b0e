"""Dependency injection module."""

from typing import Type

from tally.util.di.application import ProdApplicationProvider
from tally.util.di.base import Component, ProviderBase
from tally.util.di.core import ProdConfigProvider
from tally.util.di.domain import ProdDomainProvider
from tally.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Provider bases in container order; mockable ones are resolved per container
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that can be swapped for mocks."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
