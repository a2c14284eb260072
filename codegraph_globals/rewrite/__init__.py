"""
Rewrite Layer

Components:
- edit_buffer: byte-offset splice buffer
- global_names: global access expressions
- static_imports: import / re-export statements
- references: scope-aware identifier rewriting
- dynamic_imports: import("...") rewriting
- transformer: import_to_globals entry point
"""

from codegraph_globals.rewrite.edit_buffer import EditBuffer
from codegraph_globals.rewrite.global_names import DEFAULT_BINDING, make_global_name
from codegraph_globals.rewrite.references import ReferenceRewriter
from codegraph_globals.rewrite.state import RewriteState
from codegraph_globals.rewrite.transformer import import_to_globals

__all__ = [
    "EditBuffer",
    "DEFAULT_BINDING",
    "make_global_name",
    "ReferenceRewriter",
    "RewriteState",
    "import_to_globals",
]
