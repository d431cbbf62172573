"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quorum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component gets its production implementation: Postgres
    repositories and the in-process live hub. Settings come from the
    environment.

    Returns:
        Configured DI container
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes Request/WebSocket to REQUEST-scoped providers
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Routes use DishkaRoute to resolve FromDishka parameters; the WebSocket
    route reads APP-scoped dependencies from app.state.dishka_container.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
