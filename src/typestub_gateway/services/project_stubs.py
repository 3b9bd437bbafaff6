"""Project-stubs use case — the request orchestration pipeline.

Resolve the path, fetch the first candidate that answers, then hand the
content to the projector registered for its dialect.  Each stage raises a
domain exception on failure; the interface layer maps those to responses.
"""

from __future__ import annotations

import logging
from typing import Mapping

from typestub_gateway.domain.entities import Dialect, StubDocument
from typestub_gateway.domain.exceptions import UnsupportedDialectError
from typestub_gateway.domain.ports.source_fetcher import SourceFetcher
from typestub_gateway.domain.ports.stub_projector import StubProjector
from typestub_gateway.domain.value_objects import GITHUB_HOST
from typestub_gateway.services.path_resolver import resolve

logger = logging.getLogger(__name__)


class ProjectStubsUseCase:
    """Orchestrates path → URLs → source → stubs.

    Parameters
    ----------
    source_fetcher:
        Adapter that reads raw files from the remote host.
    projectors:
        Dialect → projector registry, built once at startup.
    host:
        Prefix for candidate URLs.
    """

    def __init__(
        self,
        source_fetcher: SourceFetcher,
        projectors: Mapping[Dialect, StubProjector],
        host: str = GITHUB_HOST,
    ) -> None:
        self._fetcher = source_fetcher
        self._projectors = projectors
        self._host = host

    async def execute(self, path: str) -> StubDocument:
        """Run the pipeline for one request path."""
        target = resolve(path, host=self._host)
        fetched = await self._fetcher.fetch_first_available(target.candidate_urls)
        logger.info("Fetched %s (%d bytes)", fetched.url, len(fetched.content))

        dialect = Dialect.for_url(fetched.url)
        projector = self._projectors.get(dialect) if dialect is not None else None
        if dialect is None or projector is None:
            raise UnsupportedDialectError(
                f"No stub projector for {fetched.url}. "
                f"Supported: {', '.join(d.extension for d in self._projectors)}"
            )

        text = projector.project(fetched.url, fetched.content)
        return StubDocument(
            text=text,
            source_url=fetched.url,
            target_extension=target.target_extension,
        )
