"""
import_to_globals entry point
"""

from collections.abc import Mapping

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.scope import attach_scopes
from codegraph_globals.analysis.syntax import NodeKind, classify
from codegraph_globals.rewrite.edit_buffer import EditBuffer
from codegraph_globals.rewrite.references import ReferenceRewriter
from codegraph_globals.rewrite.state import RewriteState
from codegraph_globals.rewrite.static_imports import analyze_export_named, analyze_import


def import_to_globals(root: TSNode, code: EditBuffer, names: Mapping[str, str]) -> bool:
    """
    Rewrite imports of mapped module specifiers into global references.

    Args:
        root: `program` node of the parsed file
        code: Edit buffer over the same source the tree was parsed from
        names: Module specifier → global object name

    Returns:
        True if any edit was made to `code`

    Raises:
        MalformedTreeError: If a module statement lacks a required child
        EditConflictError: If two edits overlap
    """
    state = RewriteState(names=names)
    scopes = attach_scopes(root)

    for node in root.named_children:
        kind = classify(node)
        if kind is NodeKind.IMPORT_STATEMENT:
            state.touched = analyze_import(node, state, code) or state.touched
        elif kind is NodeKind.EXPORT_STATEMENT:
            state.touched = analyze_export_named(node, state, code) or state.touched

    ReferenceRewriter(state, code, scopes).rewrite(root)
    return state.touched
