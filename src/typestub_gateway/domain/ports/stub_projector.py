"""Port: stub projector — turns source text of one dialect into stub text."""

from __future__ import annotations

from typing import Protocol


class StubProjector(Protocol):
    """Abstract contract for a single-dialect source → stub projection."""

    def project(self, source_id: str, content: str) -> str:
        """Parse *content* and return the rendered stubs.

        *source_id* only labels diagnostics.
        """
        ...
