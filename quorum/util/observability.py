"""Logfire setup and instrumentation.

Spans and structured logs go through logfire everywhere:

    with logfire.span("acceptance.accept", question_id=str(question_id)):
        logfire.info("Answer accepted", answer_id=str(answer_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quorum.config import Settings

SERVICE_VERSION = "0.1.0"

# Session cookies ride along on every request; keep them out of telemetry
SCRUB_PATTERNS = ["auth_token"]

# Load balancer probes
EXCLUDED_URLS = ["/health"]


def should_send(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise having a
    token is enough.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the API process or a script."""
    send_to_logfire = should_send(settings)

    logfire.configure(
        service_name="quorum-api",
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    # The live WebSocket has no method; tag it so spans can be filtered
    mapped = {**attributes, "path": request.url.path}
    mapped["transport"] = "http" if hasattr(request, "method") else "websocket"
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(
        app,
        excluded_urls=",".join(EXCLUDED_URLS),
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    # The commenter tags statements with the span so slow row locks can be traced
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
