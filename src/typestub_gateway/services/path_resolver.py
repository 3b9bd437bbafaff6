"""Path resolution — request path → candidate raw-file URLs."""

from __future__ import annotations

import logging

from typestub_gateway.domain.value_objects import (
    DEFAULT_TARGET_EXT,
    GITHUB_HOST,
    RequestPath,
    ResolvedTarget,
    split_extension,
)

logger = logging.getLogger(__name__)


def resolve(path: str, *, host: str = GITHUB_HOST) -> ResolvedTarget:
    """Resolve ``<author>/<repository>/<branch>/path/to/file``.

    Only the last fragment is inspected for an extension.  A supplied
    extension names the output format; the source dialect is always
    probed through the fixed candidate list.
    """
    request = RequestPath.from_string(path)

    *dirs, filename = request.file_fragments
    name, ext = split_extension(filename)
    stem = "/".join([*dirs, name])

    target = ResolvedTarget(
        author=request.author,
        repository=request.repository,
        branch=request.branch,
        stem=stem,
        target_extension=ext or DEFAULT_TARGET_EXT,
        host=host,
    )
    logger.debug("Resolved %r → stem=%r target=%s", path, stem, target.target_extension)
    return target
