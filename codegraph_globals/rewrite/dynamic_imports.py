"""
Dynamic import rewriting

`import("spec")` of a mapped specifier becomes `Promise.resolve(Global)`.
Only literal string specifiers are recognised.
"""

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.syntax import NodeKind, classify, string_value
from codegraph_globals.rewrite.edit_buffer import EditBuffer


def _literal(node: TSNode | None) -> str | None:
    if classify(node) is NodeKind.STRING:
        return string_value(node)
    return None


def get_dynamic_import_source(node: TSNode) -> str | None:
    """
    Literal specifier of a dynamic import, or None.

    Recognises a dedicated `import_expression` node and a call whose callee
    is the `import` pseudo-function.
    """
    kind = classify(node)
    if kind is NodeKind.IMPORT_EXPRESSION:
        return _literal(node.child_by_field_name("source"))
    if kind is NodeKind.CALL_EXPRESSION:
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "import":
            return None
        arguments = node.child_by_field_name("arguments")
        if arguments is None:
            return None
        values = [child for child in arguments.named_children if child.type != "comment"]
        return _literal(values[0]) if values else None
    return None


def write_dynamic_import(code: EditBuffer, node: TSNode, global_name: str) -> None:
    code.overwrite(node.start_byte, node.end_byte, f"Promise.resolve({global_name})")
