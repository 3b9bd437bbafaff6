"""Port: source fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, Sequence

from typestub_gateway.domain.entities import FetchResult


class SourceFetcher(Protocol):
    """Abstract contract for reading raw files from the remote source host."""

    async def fetch_first_available(self, urls: Sequence[str]) -> FetchResult:
        """Return the first candidate that answers; raise if none does."""
        ...
