"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TYPESCRIPT_MEDIA_TYPE = "application/typescript"


class Dialect(str, Enum):
    """Source dialects recognised when probing the remote host.

    Member order is the probing priority: primary first.
    """

    GO = ".go"
    PROTOBUF = ".proto"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def for_url(cls, url: str) -> Dialect | None:
        """Return the dialect whose extension *url* ends with, if any."""
        for dialect in cls:
            if url.endswith(dialect.extension):
                return dialect
        return None


@dataclass(frozen=True, slots=True)
class FetchResult:
    """The first candidate URL that answered, with its body."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class TypeStub:
    """A type known only by name; rendered as an empty interface."""

    name: str

    def render(self) -> str:
        return f"export interface {self.name} {{}}\n"


@dataclass(frozen=True, slots=True)
class StubDocument:
    """The projected output of one request, ready to be written back."""

    text: str
    source_url: str
    target_extension: str
    media_type: str = TYPESCRIPT_MEDIA_TYPE
