"""
Analysis Layer

Read-only passes over the tree-sitter syntax tree.

Components:
- syntax: node kinds and literal decoding
- scope: lexical scope attachment
- reference: variable-reference classification
- identifiers: legal identifier helpers
"""

from codegraph_globals.analysis.identifiers import is_bare_identifier, make_legal_identifier
from codegraph_globals.analysis.reference import is_reference
from codegraph_globals.analysis.scope import Scope, ScopeMap, attach_scopes
from codegraph_globals.analysis.syntax import NodeKind, classify

__all__ = [
    "NodeKind",
    "classify",
    "Scope",
    "ScopeMap",
    "attach_scopes",
    "is_reference",
    "is_bare_identifier",
    "make_legal_identifier",
]
