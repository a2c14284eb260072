"""
CodeGraph Globals

Rewrites ECMAScript module imports of selected specifiers into references to
globally available objects (e.g. a library loaded by a script tag):

    import {useState} from "react";      →   React.useState(0)
    useState(0)
    import("react")                      →   Promise.resolve(React)
"""

__version__ = "0.1.0"

from .models import TransformResult
from .pipeline import GlobalsTransformer
from .rewrite import EditBuffer, import_to_globals

__all__ = [
    "EditBuffer",
    "GlobalsTransformer",
    "TransformResult",
    "import_to_globals",
]
