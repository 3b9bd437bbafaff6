"""Go → TypeScript stub projection via tree-sitter.

Every ``type`` declaration reachable in the syntax tree becomes an empty
``export interface``.  Members, type parameters and alias targets are
dropped; only the name survives.
"""

from __future__ import annotations

import logging
from typing import Iterator

import tree_sitter
import tree_sitter_go

from typestub_gateway.domain.entities import TypeStub
from typestub_gateway.domain.exceptions import ParseFailureError
from typestub_gateway.domain.syntax import OtherNode, SyntaxNode, TypeDeclaration

logger = logging.getLogger(__name__)

GO_LANGUAGE = tree_sitter.Language(tree_sitter_go.language())

# ``type A struct{}`` and ``type A = B`` respectively.
_TYPE_DECLARATION_KINDS = frozenset({"type_spec", "type_alias"})


def _walk(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Pre-order, depth-first, children left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _classify(node: tree_sitter.Node) -> SyntaxNode:
    if node.type in _TYPE_DECLARATION_KINDS:
        name = node.child_by_field_name("name")
        if name is not None and name.text is not None:
            return TypeDeclaration(name=name.text.decode("utf-8"))
    return OtherNode(kind=node.type)


def _first_error(root: tree_sitter.Node) -> tree_sitter.Node | None:
    for node in _walk(root):
        if node.is_error or node.is_missing:
            return node
    return None


def _check_syntax(source_id: str, tree: tree_sitter.Tree) -> None:
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        row, col = bad.start_point
        raise ParseFailureError(
            f"{source_id}:{row + 1}:{col + 1}: syntax error near {bad.type!r}"
        )
    if not any(child.type == "package_clause" for child in root.children):
        raise ParseFailureError(f"{source_id}:1:1: expected 'package' clause")


def collect_type_stubs(source_id: str, content: str) -> list[TypeStub]:
    """Parse Go *content* and return one stub per type declaration, in visit order."""
    parser = tree_sitter.Parser(GO_LANGUAGE)
    tree = parser.parse(content.encode("utf-8"))
    _check_syntax(source_id, tree)

    stubs: list[TypeStub] = []
    for node in _walk(tree.root_node):
        match _classify(node):
            case TypeDeclaration(name=name):
                stubs.append(TypeStub(name=name))
            case OtherNode():
                pass
    return stubs


class GoStubProjector:
    """``StubProjector`` for Go source files."""

    def project(self, source_id: str, content: str) -> str:
        stubs = collect_type_stubs(source_id, content)
        logger.debug("Projected %d type(s) from %s", len(stubs), source_id)
        return "".join(stub.render() for stub in stubs)
