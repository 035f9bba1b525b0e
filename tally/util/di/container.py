"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from tally.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings, and with them the vote registry, are loaded from environment
    variables when first requested.
    """
    return make_async_container(*(base.implementation()() for base in PROVIDERS))
