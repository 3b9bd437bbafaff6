"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from typestub_gateway.interface.dependencies import shutdown, startup
from typestub_gateway.interface.error_handlers import register_error_handlers
from typestub_gateway.interface.routes import router


def create_app(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build the gateway.  *transport* backs the shared HTTP client (tests only)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await startup(transport)
        try:
            yield
        finally:
            await shutdown()

    app = FastAPI(
        title="TypeStub Gateway",
        version="1.0.0",
        description=(
            "GET /<author>/<repository>/<branch>/<path> fetches a Go file from "
            "GitHub and answers with one empty TypeScript interface per type."
        ),
        lifespan=lifespan,
    )
    register_error_handlers(app)

    # Must precede the catch-all stub route.
    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)
    return app
