"""
Lexical scope attachment

Builds the scope tree of a JavaScript program in one pass:

- functions (declarations, expressions, generators, arrows, methods) open a
  function scope that holds their parameters
- statement blocks that are not a function body, and catch clauses, open a
  block scope
- `var` and function/class declaration names hoist out of block scopes to the
  nearest function scope; `let`/`const` stay where they are declared

Import bindings are not declarations: the rewriter removes them.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.syntax import FUNCTION_KINDS, NodeKind, classify, node_text

_PATTERN_CONTAINERS = frozenset({"object_pattern", "array_pattern", "rest_pattern"})


class Scope:
    """A lexical scope: names declared directly in it plus a parent link."""

    def __init__(self, parent: "Scope | None" = None, block: bool = False, params: Iterable[TSNode] = ()):
        self.parent = parent
        self.is_block_scope = block
        self.declarations: set[str] = set()
        for param in params:
            self.declarations.update(extract_assigned_names(param))

    def add_declaration(self, names: Iterable[str], block: bool) -> None:
        """
        Declare names in this scope.

        Args:
            names: Declared names
            block: True for block-scoped declarations (let/const)
        """
        if not block and self.is_block_scope and self.parent is not None:
            self.parent.add_declaration(names, block)
        else:
            self.declarations.update(names)

    def contains(self, name: str) -> bool:
        """True if `name` is declared here or in any ancestor scope."""
        scope = self
        while scope is not None:
            if name in scope.declarations:
                return True
            scope = scope.parent
        return False

    def __repr__(self) -> str:
        kind = "block" if self.is_block_scope else "function"
        return f"Scope({kind}, declarations={sorted(self.declarations)})"


@dataclass
class ScopeMap:
    """Scopes attached to the nodes that open them (keyed by node id)."""

    root: Scope
    scopes: dict[int, Scope] = field(default_factory=dict)

    def scope_for(self, node: TSNode) -> Scope | None:
        return self.scopes.get(node.id)


def extract_assigned_names(node: TSNode | None) -> list[str]:
    """
    Names bound by a declaration target or parameter.

    Handles identifiers and object/array/rest/default-value patterns.
    """
    if node is None:
        return []

    kind = node.type
    if kind in ("identifier", "shorthand_property_identifier_pattern"):
        return [node_text(node)]
    if kind == "pair_pattern":
        return extract_assigned_names(node.child_by_field_name("value"))
    if kind in ("assignment_pattern", "object_assignment_pattern"):
        return extract_assigned_names(node.child_by_field_name("left"))
    if kind in ("required_parameter", "optional_parameter"):
        # TypeScript parameter wrappers
        return extract_assigned_names(node.child_by_field_name("pattern"))
    if kind in _PATTERN_CONTAINERS:
        names = []
        for child in node.named_children:
            names.extend(extract_assigned_names(child))
        return names
    return []


def _function_params(node: TSNode) -> list[TSNode]:
    single = node.child_by_field_name("parameter")
    if single is not None:
        return [single]
    params = node.child_by_field_name("parameters")
    return list(params.named_children) if params is not None else []


def _declare(node: TSNode, kind: NodeKind, scope: Scope) -> None:
    if kind in (
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.GENERATOR_FUNCTION_DECLARATION,
        NodeKind.CLASS_DECLARATION,
    ):
        name = node.child_by_field_name("name")
        if name is not None:
            scope.add_declaration([node_text(name)], block=False)

    elif kind in (NodeKind.VARIABLE_DECLARATION, NodeKind.LEXICAL_DECLARATION):
        block = kind is NodeKind.LEXICAL_DECLARATION
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                scope.add_declaration(extract_assigned_names(declarator.child_by_field_name("name")), block)

    elif kind is NodeKind.FOR_IN_STATEMENT:
        declaration_kind = node.child_by_field_name("kind")
        if declaration_kind is not None:
            names = extract_assigned_names(node.child_by_field_name("left"))
            scope.add_declaration(names, block=declaration_kind.type != "var")


def _open_scope(node: TSNode, kind: NodeKind, parent: TSNode | None, scope: Scope) -> Scope | None:
    if kind in FUNCTION_KINDS:
        new_scope = Scope(parent=scope, block=False, params=_function_params(node))
        if kind in (NodeKind.FUNCTION_EXPRESSION, NodeKind.GENERATOR_FUNCTION):
            name = node.child_by_field_name("name")
            if name is not None:
                new_scope.add_declaration([node_text(name)], block=False)
        return new_scope

    if kind is NodeKind.STATEMENT_BLOCK and classify(parent) not in FUNCTION_KINDS:
        return Scope(parent=scope, block=True)

    if kind is NodeKind.CATCH_CLAUSE:
        param = node.child_by_field_name("parameter")
        return Scope(parent=scope, block=True, params=[param] if param is not None else [])

    return None


def attach_scopes(root: TSNode) -> ScopeMap:
    """
    Compute the scope tree of a program.

    Args:
        root: `program` node

    Returns:
        ScopeMap whose root scope holds the top-level declarations
    """
    scope_map = ScopeMap(root=Scope())
    _attach(root, None, scope_map.root, scope_map)
    return scope_map


def _attach(node: TSNode, parent: TSNode | None, scope: Scope, scope_map: ScopeMap) -> None:
    kind = classify(node)
    _declare(node, kind, scope)

    new_scope = _open_scope(node, kind, parent, scope)
    if new_scope is not None:
        scope_map.scopes[node.id] = new_scope
        scope = new_scope

    for child in node.children:
        _attach(child, node, scope, scope_map)
