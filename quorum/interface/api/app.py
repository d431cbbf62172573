"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quorum.config import Settings
from quorum.interface.api.errors import register_exception_handlers
from quorum.interface.api.routes import (
    answers,
    comments,
    health,
    live,
    notifications,
    questions,
    votes,
)
from quorum.util.di.container import create_container, setup_di
from quorum.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Runs APP-scope finalizers: closes the live hub and disposes the engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Tests pass their own container; otherwise the production one is built.
    Logfire should already be configured; start_app.py does that before
    uvicorn imports this module.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quorum API",
        description="Questions, answers, reactions and live notifications",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
        max_age=settings.api.cors_max_age,
    )

    setup_di(app_instance, container or create_container())

    register_exception_handlers(app_instance)

    for module in (health, questions, answers, comments, votes, notifications, live):
        app_instance.include_router(module.router)

    return app_instance


# Served by uvicorn from start_app.py
app = create_app()
