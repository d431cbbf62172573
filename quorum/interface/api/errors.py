"""Translate domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from quorum.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)

_STATUS_CODES: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_code_for(error: DomainError) -> int:
    """HTTP status for a domain error, walking its class hierarchy."""
    for cls in type(error).__mro__:
        if cls in _STATUS_CODES:
            return _STATUS_CODES[cls]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as {"detail": message}."""
    status_code = status_code_for(exc)
    logfire.warn(
        "Request failed with domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Use case request models that reject input map to 400."""
    logfire.warn("Request failed validation", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
