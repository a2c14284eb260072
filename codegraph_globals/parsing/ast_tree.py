"""
AST Tree wrapper for Tree-sitter
"""

try:
    from tree_sitter import Node as TSNode
    from tree_sitter import Tree as TSTree
except ImportError as e:
    raise ImportError("tree-sitter is required. Install with: pip install tree-sitter") from e

from codegraph_globals.common.exceptions import ParsingError
from codegraph_globals.parsing.parser_registry import get_registry
from codegraph_globals.parsing.source_file import SourceFile


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Keeps the source next to the tree so node byte offsets can be resolved.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._content = source.content_bytes

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Args:
            source: Source file to parse

        Returns:
            AstTree instance

        Raises:
            ParsingError: If language not supported or parsing fails
        """
        parser = get_registry().get_parser(source.language)

        if parser is None:
            raise ParsingError(f"Language not supported: {source.language}", {"file": source.file_path})

        tree = parser.parse(source.content_bytes)

        if tree is None:
            raise ParsingError(f"Failed to parse file: {source.file_path}")

        return cls(source, tree)

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def get_text(self, node: TSNode) -> str:
        """
        Get text content of a node.

        Tree-sitter offsets are byte offsets, so slicing happens on the
        encoded content.
        """
        return self._content[node.start_byte : node.end_byte].decode(self.source.encoding)

    def has_error(self, node: TSNode | None = None) -> bool:
        """Check if AST has any error or missing nodes."""
        if node is None:
            node = self._root
        return node.has_error

    def get_errors(self, node: TSNode | None = None) -> list[TSNode]:
        """
        Get all error nodes.

        Args:
            node: Starting node (defaults to root)

        Returns:
            List of error nodes
        """
        if node is None:
            node = self._root

        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)

        for child in node.children:
            errors.extend(self.get_errors(child))

        return errors

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
