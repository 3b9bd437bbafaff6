"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code; the body is the
exception message as plain text.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from typestub_gateway.domain.exceptions import (
    MalformedPathError,
    ParseFailureError,
    SourceFileNotFoundError,
    TypeStubGatewayError,
    UnsupportedDialectError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[TypeStubGatewayError], int]] = [
    (MalformedPathError, 400),
    (SourceFileNotFoundError, 404),
    (UnsupportedDialectError, 415),
    (ParseFailureError, 422),
]


def _error_text(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> PlainTextResponse:
                logger.warning("%s %s: %s", request.url.path, type(exc).__name__, exc)
                return _error_text(status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled exception")
        return _error_text(500, "An unexpected error occurred. Please try again later.")
