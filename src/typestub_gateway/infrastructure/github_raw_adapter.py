"""GitHub raw-file adapter — implements the SourceFetcher port."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from typestub_gateway.domain.entities import FetchResult
from typestub_gateway.domain.exceptions import SourceFileNotFoundError

logger = logging.getLogger(__name__)


class GitHubRawAdapter:
    """Concrete SourceFetcher reading ``/<author>/<repo>/<branch>/raw/<path>`` URLs.

    The client must follow redirects: GitHub answers ``/raw/`` with a 302
    to raw.githubusercontent.com.
    """

    def __init__(
        self, client: httpx.AsyncClient, *, reject_error_status: bool = False
    ) -> None:
        self._client = client
        self._reject_error_status = reject_error_status

    async def fetch_first_available(self, urls: Sequence[str]) -> FetchResult:
        """GET each candidate in order; the first response wins."""
        for url in urls:
            try:
                resp = await self._client.get(
                    url,
                    headers={"User-Agent": "typestub-gateway/1.0"},
                )
            except httpx.TransportError as exc:
                logger.debug("Candidate %s unreachable: %s", url, exc)
                continue

            if self._reject_error_status and resp.status_code >= 400:
                logger.debug("Candidate %s returned HTTP %d", url, resp.status_code)
                continue

            return FetchResult(url=url, content=resp.text)

        raise SourceFileNotFoundError("File not found.")
