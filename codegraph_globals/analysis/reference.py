"""
Reference classification

Decides whether a name node stands for a variable (a value reference or a
local declaration site) rather than a property key, a label or a module
export name. Tree-sitter already gives property keys, member properties,
labels and type names their own node types, so only a few `identifier`
positions need a parent check here.
"""

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.syntax import SHORTHAND_KINDS, NodeKind, classify, node_text

_IMPORT_PARENTS = frozenset({"import_clause", "import_specifier", "namespace_import", "import_require_clause"})
_JSX_ELEMENT_PARENTS = frozenset({"jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element"})


def _is_field(parent: TSNode, field_name: str, node: TSNode) -> bool:
    child = parent.child_by_field_name(field_name)
    return child is not None and child.id == node.id


def export_statement_of(specifier: TSNode) -> TSNode | None:
    """The export_statement owning an export_specifier (through its export_clause)."""
    clause = specifier.parent
    return clause.parent if clause is not None else None


def is_reference(node: TSNode) -> bool:
    """
    True if `node` names a variable.

    Shorthand object properties (`{x}`, `const {x} = o`) count: the same
    node is both key and variable.
    """
    kind = classify(node)
    if kind in SHORTHAND_KINDS:
        return True
    if kind is not NodeKind.IDENTIFIER:
        return False

    parent = node.parent
    if parent is None:
        return True

    if parent.type in _IMPORT_PARENTS:
        return False

    if parent.type == "jsx_namespace_name":
        # <svg:rect xlink:href="..."/>
        return False

    if parent.type == "export_specifier":
        # `export {local as exported}`: only `local` is a variable, and only
        # when the statement re-exports from the current module
        statement = export_statement_of(parent)
        has_source = statement is not None and statement.child_by_field_name("source") is not None
        return _is_field(parent, "name", node) and not has_source

    if parent.type in _JSX_ELEMENT_PARENTS and _is_field(parent, "name", node):
        # lowercase tags are intrinsic elements, not variables
        return not node_text(node)[:1].islower()

    return True
