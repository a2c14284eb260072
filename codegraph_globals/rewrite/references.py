"""
Scope-aware reference rewriting

One depth-first traversal after the static pass. For every variable name:

- a reference to a removed import binding that no enclosing scope redeclares
  is redirected to the binding's global access expression
- a local that shadows one of the introduced global object names is renamed
  to `_local_<name>` so it cannot be confused with the global

Dynamic imports of mapped specifiers are rewritten during the same walk.
"""

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.reference import export_statement_of, is_reference
from codegraph_globals.analysis.scope import Scope, ScopeMap
from codegraph_globals.analysis.syntax import SHORTHAND_KINDS, NodeKind, classify, node_text
from codegraph_globals.common.observability import get_logger
from codegraph_globals.rewrite.dynamic_imports import get_dynamic_import_source, write_dynamic_import
from codegraph_globals.rewrite.edit_buffer import EditBuffer
from codegraph_globals.rewrite.global_names import LOCAL_ALIAS_PREFIX
from codegraph_globals.rewrite.state import RewriteState
from codegraph_globals.rewrite.static_imports import write_export_local

logger = get_logger(__name__)


class ReferenceRewriter:
    """
    Rewrites variable references and dynamic imports of one file.

    The current scope is an explicit stack: nodes that open a scope push it
    on entry and pop it on exit.
    """

    def __init__(self, state: RewriteState, code: EditBuffer, scopes: ScopeMap):
        self.state = state
        self.code = code
        self.scopes = scopes
        self._stack: list[Scope] = [scopes.root]

    @property
    def current_scope(self) -> Scope:
        return self._stack[-1]

    def rewrite(self, root: TSNode) -> None:
        self._visit(root)

    def _visit(self, node: TSNode) -> None:
        kind = classify(node)
        if kind is NodeKind.IMPORT_STATEMENT:
            return

        scope = self.scopes.scope_for(node)
        if scope is not None:
            self._stack.append(scope)

        if is_reference(node):
            self._rewrite_reference(node, kind)

        if not self._rewrite_dynamic_import(node):
            for child in node.children:
                self._visit(child)

        if scope is not None:
            self._stack.pop()

    def _rewrite_reference(self, node: TSNode, kind: NodeKind) -> None:
        name = node_text(node)
        bindings = self.state.bindings
        if name in bindings and not self.current_scope.contains(name):
            self._write_identifier(node, kind, bindings[name])
        elif name in self.state.globals and self.current_scope.contains(name):
            self._write_identifier(node, kind, f"{LOCAL_ALIAS_PREFIX}{name}")

    def _write_identifier(self, node: TSNode, kind: NodeKind, name: str) -> None:
        key = (node.start_byte, node.end_byte)
        if node_text(node) == name or key in self.state.rewritten:
            return

        parent = node.parent
        if kind in SHORTHAND_KINDS:
            # {x} → {x: name}
            self.code.append_left(node.end_byte, f": {name}")
        elif parent is not None and parent.type == "export_specifier":
            write_export_local(self.code, self.state, export_statement_of(parent), parent, name)
        else:
            self.code.overwrite(node.start_byte, node.end_byte, name, content_only=True)

        self.state.rewritten.add(key)

    def _rewrite_dynamic_import(self, node: TSNode) -> bool:
        source = get_dynamic_import_source(node)
        if source is None or source not in self.state.names:
            return False

        key = (node.start_byte, node.end_byte)
        if key not in self.state.rewritten:
            write_dynamic_import(self.code, node, self.state.names[source])
            self.state.rewritten.add(key)
            logger.debug("dynamic_import_rewritten", source=source, global_name=self.state.names[source])
        self.state.touched = True
        return True
