"""
Static import/export rewriting

Handles the top-level module statements before the reference traversal:

- `import ... from "spec"` (and TypeScript `import x = require("spec")`) is
  removed and its bindings are recorded
- `export {a, b as c} from "spec"` becomes a local re-export of the global,
  going through a temporary constant when the access path is dotted:

    export {fn} from "lib";
    →
    const _global_Lib_fn = Lib.fn;
    export {_global_Lib_fn as fn};
"""

from tree_sitter import Node as TSNode

from codegraph_globals.analysis.identifiers import is_bare_identifier, make_legal_identifier
from codegraph_globals.analysis.syntax import name_value, node_text, string_value
from codegraph_globals.common.exceptions import MalformedTreeError
from codegraph_globals.common.observability import get_logger
from codegraph_globals.rewrite.edit_buffer import EditBuffer
from codegraph_globals.rewrite.global_names import DEFAULT_BINDING, TEMP_NAME_PREFIX, make_global_name
from codegraph_globals.rewrite.state import RewriteState

logger = get_logger(__name__)


def _child_of_type(node: TSNode, node_type: str) -> TSNode | None:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None


def _required_field(node: TSNode, field_name: str) -> TSNode:
    child = node.child_by_field_name(field_name)
    if child is None:
        raise MalformedTreeError(
            f"{node.type} without '{field_name}'",
            {"start_byte": node.start_byte, "end_byte": node.end_byte},
        )
    return child


def import_source(node: TSNode) -> TSNode:
    """
    Specifier string of an import statement.

    `import x = require("m")` keeps it inside the require clause.
    """
    require = _child_of_type(node, "import_require_clause")
    if require is None:
        return _required_field(node, "source")
    source = require.child_by_field_name("source")
    if source is None:
        source = _child_of_type(require, "string")
    if source is None:
        raise MalformedTreeError(
            "import_require_clause without 'source'",
            {"start_byte": require.start_byte, "end_byte": require.end_byte},
        )
    return source


def import_bindings(node: TSNode) -> list[tuple[str, str]]:
    """
    (local name, imported name) pairs of an import statement.

    Default and namespace imports, and TypeScript's `import x = require(...)`,
    report the default sentinel as the imported name, so they all resolve to
    the global object itself.
    """
    require = _child_of_type(node, "import_require_clause")
    if require is not None:
        local = _child_of_type(require, "identifier")
        if local is None:
            raise MalformedTreeError("import_require_clause without local name", {"start_byte": require.start_byte})
        return [(node_text(local), DEFAULT_BINDING)]

    clause = _child_of_type(node, "import_clause")
    if clause is None:
        return []

    bindings = []
    for child in clause.named_children:
        if child.type == "identifier":
            bindings.append((node_text(child), DEFAULT_BINDING))
        elif child.type == "namespace_import":
            local = _child_of_type(child, "identifier")
            if local is None:
                raise MalformedTreeError("namespace import without local name", {"start_byte": child.start_byte})
            bindings.append((node_text(local), DEFAULT_BINDING))
        elif child.type == "named_imports":
            for spec in child.named_children:
                if spec.type != "import_specifier":
                    continue
                name = _required_field(spec, "name")
                alias = spec.child_by_field_name("alias")
                local = alias if alias is not None else name
                bindings.append((node_text(local), name_value(name)))
    return bindings


def analyze_import(node: TSNode, state: RewriteState, code: EditBuffer) -> bool:
    """
    Remove an import of a mapped specifier and record its bindings.

    Returns:
        True if the statement was rewritten
    """
    specifier = string_value(import_source(node))
    if specifier not in state.names:
        return False

    global_name = state.names[specifier]
    state.globals.add(global_name)
    for local, imported in import_bindings(node):
        state.bindings[local] = make_global_name(imported, global_name)

    code.remove(node.start_byte, node.end_byte)
    logger.debug("import_removed", source=specifier, global_name=global_name)
    return True


def write_spec_local(code: EditBuffer, spec: TSNode, name: str) -> None:
    """
    Make `name` the local side of an export specifier.

    The exported name is kept: `{x as y}` gets its `x` overwritten, while a
    bare `{x}` becomes `{name as x}`.
    """
    local = _required_field(spec, "name")
    if node_text(local) == name:
        return
    if spec.child_by_field_name("alias") is None:
        code.append_right(local.start_byte, f"{name} as ")
    else:
        code.overwrite(local.start_byte, local.end_byte, name)


def write_export_local(code: EditBuffer, state: RewriteState, statement: TSNode, spec: TSNode, target: str) -> None:
    """
    Export the global access expression `target` through `spec`.

    A dotted `target` cannot be named in an export clause, so it is bound to
    a temporary constant declared (once per file) before `statement`.
    """
    local = target
    if not is_bare_identifier(target):
        local = TEMP_NAME_PREFIX + make_legal_identifier(target)
        if local not in state.temp_names:
            code.append_right(statement.start_byte, f"const {local} = {target};\n")
            state.temp_names.add(local)
    write_spec_local(code, spec, local)


def analyze_export_named(node: TSNode, state: RewriteState, code: EditBuffer) -> bool:
    """
    Collapse `export {...} from "spec"` of a mapped specifier into a local export.

    Returns:
        True if the statement was rewritten
    """
    if node.child_by_field_name("declaration") is not None:
        return False
    source = node.child_by_field_name("source")
    if source is None:
        return False
    specifier = string_value(source)
    if specifier not in state.names:
        return False
    clause = _child_of_type(node, "export_clause")
    if clause is None:
        # export * from "spec"
        return False

    global_name = state.names[specifier]
    specs = [child for child in clause.named_children if child.type == "export_specifier"]
    for spec in specs:
        imported = name_value(_required_field(spec, "name"))
        write_export_local(code, state, node, spec, make_global_name(imported, global_name))

    if specs:
        code.overwrite(specs[-1].end_byte, source.end_byte, "}")
    else:
        code.remove(node.start_byte, node.end_byte)

    logger.debug("reexport_collapsed", source=specifier, global_name=global_name, specifiers=len(specs))
    return True
