"""
Per-file rewrite state
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass
class RewriteState:
    """
    Everything one import-to-globals run shares between its passes.

    Created fresh for every file and discarded afterwards. `bindings` and
    `globals` are filled by the static pass only and read by the traversal.

    Attributes:
        names: Module specifier → global object name
        bindings: Local import name → global access expression (`Lib.fn`, `Lib`)
        globals: Global object names introduced by rewritten imports
        temp_names: Temporary constants already emitted for re-exports
        rewritten: (start_byte, end_byte) of nodes already rewritten
        touched: True once any edit was made
    """

    names: Mapping[str, str]
    bindings: dict[str, str] = field(default_factory=dict)
    globals: set[str] = field(default_factory=set)
    temp_names: set[str] = field(default_factory=set)
    rewritten: set[tuple[int, int]] = field(default_factory=set)
    touched: bool = False
