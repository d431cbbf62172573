"""Fixture factories shared by unit, integration and e2e tests.

Everything runs against in-memory fakes unless a component is unmocked;
unmocked persistence needs PostgreSQL at DATABASE__URL.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from quorum.interface.api.app import create_app
from quorum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a fixture yielding a request-scoped container.

    Use it to pull services and repositories straight out of the graph:

        env = create_env_fixture(unmock={"persistence"})

        async def test_round_trip(env):
            repo = await env.get(QuestionRepository)

    The request scope stays open for the whole test, so every repository
    shares one session.
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for API client fixtures.

    The app gets its own test container and the client is entered, so
    every request and WebSocket shares one event loop. Leaving the client
    runs the app's shutdown, which closes the container.

    Usage:
        client = create_client_fixture()

        def test_health(client):
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container(unmock=unmock or set()))
        with TestClient(app) as test_client:
            yield test_client

    return _client
