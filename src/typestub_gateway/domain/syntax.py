"""Syntax-node variants the projectors dispatch on.

Parsers classify raw tree nodes into this closed set; projectors then
``match`` over it instead of inspecting parser-specific node objects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TypeDeclaration:
    """A named type definition (struct, interface, alias, ...)."""

    name: str


@dataclass(frozen=True, slots=True)
class OtherNode:
    """Any node the projectors do not care about."""

    kind: str


SyntaxNode = TypeDeclaration | OtherNode
