"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from tally.util.di import PROVIDERS, Component, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory vote store
        container = build_test_container()

        # Integration tests - PostgreSQL vote store
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        base.implementation(use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
