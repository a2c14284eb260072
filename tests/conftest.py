"""
Global test configuration and fixtures
"""

from collections.abc import Iterator

import pytest
from tree_sitter import Node as TSNode

from codegraph_globals.parsing import AstTree, SourceFile
from codegraph_globals.rewrite import EditBuffer, import_to_globals


def _walk(node: TSNode) -> Iterator[TSNode]:
    yield node
    for child in node.children:
        yield from _walk(child)


@pytest.fixture
def parse():
    """Parse source text into an AstTree (JavaScript unless told otherwise)."""

    def _parse(source: str, language: str = "javascript") -> AstTree:
        return AstTree.parse(SourceFile.from_content("test.js", source, language))

    return _parse


@pytest.fixture
def walk():
    """All nodes of a subtree in DFS pre-order."""
    return lambda node: list(_walk(node))


@pytest.fixture
def find():
    """Nodes of one type in DFS pre-order."""

    def _find(root: TSNode, node_type: str) -> list[TSNode]:
        return [node for node in _walk(root) if node.type == node_type]

    return _find


@pytest.fixture
def rewrite(parse):
    """Run import_to_globals over source text; returns (rendered code, touched)."""

    def _rewrite(source: str, names: dict[str, str], language: str = "javascript") -> tuple[str, bool]:
        tree = parse(source, language)
        code = EditBuffer(source)
        touched = import_to_globals(tree.root, code, names)
        return str(code), touched

    return _rewrite
