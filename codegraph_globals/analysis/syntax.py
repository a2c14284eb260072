"""
Syntax kinds

Closed set of tree-sitter node types the scope and rewrite passes dispatch on.
Every other node type classifies as NodeKind.OTHER.
"""

from enum import Enum

from tree_sitter import Node as TSNode


class NodeKind(str, Enum):
    """Node kinds relevant to import rewriting."""

    PROGRAM = "program"
    IMPORT_STATEMENT = "import_statement"
    EXPORT_STATEMENT = "export_statement"
    EXPORT_CLAUSE = "export_clause"
    EXPORT_SPECIFIER = "export_specifier"

    IDENTIFIER = "identifier"
    SHORTHAND_PROPERTY = "shorthand_property_identifier"
    SHORTHAND_PROPERTY_PATTERN = "shorthand_property_identifier_pattern"

    FUNCTION_DECLARATION = "function_declaration"
    GENERATOR_FUNCTION_DECLARATION = "generator_function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    GENERATOR_FUNCTION = "generator_function"
    ARROW_FUNCTION = "arrow_function"
    METHOD_DEFINITION = "method_definition"
    CLASS_DECLARATION = "class_declaration"

    STATEMENT_BLOCK = "statement_block"
    CATCH_CLAUSE = "catch_clause"
    VARIABLE_DECLARATION = "variable_declaration"
    LEXICAL_DECLARATION = "lexical_declaration"
    FOR_IN_STATEMENT = "for_in_statement"

    CALL_EXPRESSION = "call_expression"
    IMPORT_EXPRESSION = "import_expression"
    STRING = "string"

    OTHER = "other"


_KINDS = {kind.value: kind for kind in NodeKind if kind is not NodeKind.OTHER}

# Older grammar releases name function expressions "function"
_KINDS["function"] = NodeKind.FUNCTION_EXPRESSION

FUNCTION_KINDS = frozenset(
    {
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.GENERATOR_FUNCTION_DECLARATION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.GENERATOR_FUNCTION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.METHOD_DEFINITION,
    }
)

SHORTHAND_KINDS = frozenset({NodeKind.SHORTHAND_PROPERTY, NodeKind.SHORTHAND_PROPERTY_PATTERN})


def classify(node: TSNode | None) -> NodeKind:
    """Map a tree-sitter node to its NodeKind (OTHER for anything unrecognised)."""
    if node is None:
        return NodeKind.OTHER
    return _KINDS.get(node.type, NodeKind.OTHER)


def node_text(node: TSNode) -> str:
    """Source text of a node."""
    return node.text.decode("utf-8")


_SINGLE_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}
_LINE_CONTINUATIONS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})
_OCTAL_DIGITS = frozenset("01234567")
_MAX_CODE_POINT = 0x10FFFF


def decode_escape(text: str) -> str:
    """
    Value of one JavaScript escape sequence (backslash included).

    Surrogate halves (`\\uD83D`) come back unpaired; string_value joins them.
    """
    body = text[1:]
    if body.startswith("u{"):
        code_point = int(body[2:-1], 16)
        # out of range is a syntax error the grammar lets through
        return chr(code_point) if code_point <= _MAX_CODE_POINT else text
    if body[:1] in ("u", "x"):
        return chr(int(body[1:], 16))
    if body and set(body) <= _OCTAL_DIGITS:
        return chr(int(body, 8))
    if body in _LINE_CONTINUATIONS:
        return ""
    return _SINGLE_ESCAPES.get(body, body)


def string_value(node: TSNode) -> str:
    """
    Decode a string literal node.

    Args:
        node: A `string` node (quotes included in its span)

    Returns:
        The literal's value with escape sequences resolved
    """
    parts = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(decode_escape(node_text(child)))
    # join surrogate pairs; lone halves pass through
    return "".join(parts).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def name_value(node: TSNode) -> str:
    """Value of a module export/import name (identifier, `default`, or string)."""
    if classify(node) is NodeKind.STRING:
        return string_value(node)
    return node_text(node)
