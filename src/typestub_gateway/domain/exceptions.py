"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class TypeStubGatewayError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class MalformedPathError(TypeStubGatewayError):
    """The request path lacks author, repository or branch (400)."""


# ── Remote source host ──────────────────────────────────────────────────────


class SourceFileNotFoundError(TypeStubGatewayError):
    """No candidate URL could be read from the remote host (404)."""


# ── Projection ──────────────────────────────────────────────────────────────


class UnsupportedDialectError(TypeStubGatewayError):
    """The fetched file is in a dialect with no registered projector (415)."""


class ParseFailureError(TypeStubGatewayError):
    """The fetched content is not valid source for its dialect (422)."""
