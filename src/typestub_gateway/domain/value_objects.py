"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from typestub_gateway.domain.entities import Dialect
from typestub_gateway.domain.exceptions import MalformedPathError

GITHUB_HOST = "https://github.com"
RAW_SEGMENT = "raw"
DEFAULT_FILENAME = "__fart.go"
DEFAULT_TARGET_EXT = ".ts"

MALFORMED_PATH_MESSAGE = (
    "Invalid path. Expects /<author>/<repository>/<branch>/path/to/file..."
)


@dataclass(frozen=True, slots=True)
class RequestPath:
    """An inbound path split into its repository coordinates.

    ``alice/repo/main/pkg/types.ts`` becomes author ``alice``, repository
    ``repo``, branch ``main`` and file fragments ``("pkg", "types.ts")``.
    """

    author: str
    repository: str
    branch: str
    file_fragments: tuple[str, ...]

    @classmethod
    def from_string(cls, path: str) -> RequestPath:
        """Split and validate a raw path string."""
        fragments = path.split("/")
        if len(fragments) < 3:
            raise MalformedPathError(MALFORMED_PATH_MESSAGE)

        author, repository, branch = fragments[0], fragments[1], fragments[2]
        file_fragments = tuple(fragments[3:]) or (DEFAULT_FILENAME,)
        return cls(
            author=author,
            repository=repository,
            branch=branch,
            file_fragments=file_fragments,
        )


def split_extension(filename: str) -> tuple[str, str]:
    """Split at the last dot; the extension keeps the dot.

    Leading dots get no special treatment: ``.gitignore`` has an empty stem.
    """
    dot = filename.rfind(".")
    if dot == -1:
        return filename, ""
    return filename[:dot], filename[dot:]


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    """Where to look for a requested file and what to call the output."""

    author: str
    repository: str
    branch: str
    stem: str
    target_extension: str
    source_extensions: tuple[str, ...] = tuple(d.extension for d in Dialect)
    host: str = GITHUB_HOST

    @property
    def candidate_urls(self) -> list[str]:
        """Remote URLs to try, in source-extension priority order."""
        return [
            "/".join(
                [
                    self.host,
                    self.author,
                    self.repository,
                    self.branch,
                    RAW_SEGMENT,
                    self.stem + ext,
                ]
            )
            for ext in self.source_extensions
        ]
