"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from quorum.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with mocks for every component not in unmock.

    Mocks keep all state in process: repositories share one InMemoryStore
    and the live channel records what it publishes. Unmocked persistence
    assumes PostgreSQL is reachable at DATABASE__URL.

    Args:
        unmock: Components that get their production implementation

    Returns:
        Configured test container

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, recorded live events
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = {p.__mock_component__ for p in PROVIDERS if p.is_mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    # Concrete providers ignore use_mock
    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]

    # FastapiProvider lets the same container serve TestClient requests
    return make_async_container(*providers, FastapiProvider())
