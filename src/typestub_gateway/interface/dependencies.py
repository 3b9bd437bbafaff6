"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache
from typing import Mapping

import httpx

from typestub_gateway.domain.entities import Dialect
from typestub_gateway.domain.ports.stub_projector import StubProjector
from typestub_gateway.infrastructure.config import Settings, get_settings
from typestub_gateway.infrastructure.github_raw_adapter import GitHubRawAdapter
from typestub_gateway.services.go_projector import GoStubProjector
from typestub_gateway.services.project_stubs import ProjectStubsUseCase

_http_client: httpx.AsyncClient | None = None
_projectors: Mapping[Dialect, StubProjector] | None = None


def build_projectors() -> dict[Dialect, StubProjector]:
    """Dialect → projector registry.  Protocol Buffers has no projector yet."""
    return {Dialect.GO: GoStubProjector()}


def build_http_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    """Client shared by every request.  GitHub answers `/raw/` with a redirect."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.fetch_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )


async def startup(transport: httpx.AsyncBaseTransport | None = None) -> None:
    """Initialise shared resources; *transport* replaces the network in tests."""
    global _http_client, _projectors  # noqa: PLW0603

    _http_client = build_http_client(get_settings(), transport)
    _projectors = build_projectors()


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _projectors  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _projectors = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_use_case() -> ProjectStubsUseCase:
    """Build the use-case with injected adapters."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"
    assert _projectors is not None, "startup() was not called"

    fetcher = GitHubRawAdapter(
        client=_http_client,
        reject_error_status=settings.reject_error_status,
    )
    return ProjectStubsUseCase(
        source_fetcher=fetcher,
        projectors=_projectors,
        host=settings.remote_host,
    )
