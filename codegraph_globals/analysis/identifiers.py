"""
Legal identifier helpers
"""

import re

RESERVED_WORDS = (
    "break case class catch const continue debugger default delete do else export extends finally for "
    "function if import in instanceof let new return super switch this throw try typeof var void while "
    "with yield enum await implements package protected static interface private public"
).split()

BUILTINS = (
    "arguments Infinity NaN undefined null true false eval uneval isFinite isNaN parseFloat parseInt "
    "decodeURI decodeURIComponent encodeURI encodeURIComponent escape unescape Object Function Boolean "
    "Symbol Error EvalError InternalError RangeError ReferenceError SyntaxError TypeError URIError Number "
    "Math Date String RegExp Array Int8Array Uint8Array Uint8ClampedArray Int16Array Uint16Array Int32Array "
    "Uint32Array Float32Array Float64Array Map Set WeakMap WeakSet SIMD ArrayBuffer DataView JSON Promise "
    "Generator GeneratorFunction Reflect Proxy Intl"
).split()

_BLACKLISTED = frozenset(RESERVED_WORDS) | frozenset(BUILTINS)

_DASH_LETTER = re.compile(r"-(\w)", re.ASCII)
_ILLEGAL_CHAR = re.compile(r"[^$_a-zA-Z0-9]")
_BARE_IDENTIFIER = re.compile(r"[\w$]+", re.ASCII)


def make_legal_identifier(text: str) -> str:
    """
    Turn arbitrary text into a usable JavaScript identifier.

    `foo-bar` becomes `fooBar`, other illegal characters become `_`, and a
    leading digit or a reserved/builtin name gets a `_` prefix.

    Args:
        text: Any string (module path, dotted global path, ...)

    Returns:
        Identifier (never empty)
    """
    text = _DASH_LETTER.sub(lambda m: m.group(1).upper(), text)
    text = _ILLEGAL_CHAR.sub("_", text)
    if (text and text[0].isdigit()) or text in _BLACKLISTED:
        text = f"_{text}"
    return text or "_"


def is_bare_identifier(text: str) -> bool:
    """True if `text` is made only of word characters and `$` (no dots)."""
    return _BARE_IDENTIFIER.fullmatch(text) is not None
