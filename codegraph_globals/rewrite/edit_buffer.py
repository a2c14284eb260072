"""
Edit Buffer

Records splice edits against the original source by byte offset and renders
them once. Offsets always refer to the original text, so edits can be made in
any order without shifting each other.

Insertion sides:
- append_left(pos, text): text sticks to the content that ends at `pos`
- append_right(pos, text): text sticks to the content that starts at `pos`

At one position, left insertions render before right insertions, each in
call order.
"""

from codegraph_globals.common.exceptions import EditConflictError, InvalidEditError


class EditBuffer:
    """
    Byte-offset edit buffer over a source string.

    Example:
        ```python
        code = EditBuffer("import x from 'a';\\nx();")
        code.remove(0, 18)
        code.overwrite(19, 20, "A", content_only=True)
        str(code)  # "\\nA();"
        ```
    """

    def __init__(self, source: str | bytes, encoding: str = "utf-8"):
        self.encoding = encoding
        self.original = source.encode(encoding) if isinstance(source, str) else source
        self._replaced: dict[int, tuple[int, bytes]] = {}  # start → (end, content)
        self._left: dict[int, list[bytes]] = {}
        self._right: dict[int, list[bytes]] = {}

    # ============================================================
    # Edits
    # ============================================================

    def remove(self, start: int, end: int) -> None:
        """Delete [start, end) together with insertions attached inside it."""
        self._check_range(start, end)
        if start == end:
            return
        self._replace(start, end, b"", clear=True)

    def overwrite(self, start: int, end: int, content: str, content_only: bool = False) -> None:
        """
        Replace [start, end) with `content`.

        Args:
            start: Start byte offset (inclusive)
            end: End byte offset (exclusive)
            content: Replacement text
            content_only: Keep insertions already attached to the range
        """
        self._check_range(start, end)
        if start == end:
            raise InvalidEditError("Cannot overwrite a zero-length range", {"start": start})
        self._replace(start, end, content.encode(self.encoding), clear=not content_only)

    def append_left(self, pos: int, text: str) -> None:
        self._check_range(pos, pos)
        self._left.setdefault(pos, []).append(text.encode(self.encoding))

    def append_right(self, pos: int, text: str) -> None:
        self._check_range(pos, pos)
        self._right.setdefault(pos, []).append(text.encode(self.encoding))

    # ============================================================
    # Rendering
    # ============================================================

    def has_changed(self) -> bool:
        return bool(self._replaced or self._left or self._right)

    def to_string(self) -> str:
        """Render the edited text."""
        if not self.has_changed():
            return self.original.decode(self.encoding)

        points = {0, len(self.original)} | self._left.keys() | self._right.keys()
        for start, (end, _) in self._replaced.items():
            points.update((start, end))
        ordered = sorted(points)

        out = bytearray()
        replaced_until = 0
        for index, pos in enumerate(ordered):
            out += b"".join(self._left.get(pos, ()))
            out += b"".join(self._right.get(pos, ()))
            if index + 1 == len(ordered):
                break
            if pos in self._replaced:
                replaced_until, content = self._replaced[pos]
                out += content
            elif pos >= replaced_until:
                out += self.original[pos : ordered[index + 1]]

        return out.decode(self.encoding)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"EditBuffer(length={len(self.original)}, replacements={len(self._replaced)})"

    # ============================================================
    # Internals
    # ============================================================

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.original):
            raise InvalidEditError(
                "Edit range out of bounds",
                {"start": start, "end": end, "length": len(self.original)},
            )

    def _replace(self, start: int, end: int, content: bytes, clear: bool) -> None:
        for other_start, (other_end, _) in list(self._replaced.items()):
            if other_start < start < other_end or other_start < end < other_end:
                raise EditConflictError(
                    "Cannot split a range that has already been edited",
                    {"range": (start, end), "edited": (other_start, other_end)},
                )
            if start <= other_start and other_end <= end:
                del self._replaced[other_start]

        self._replaced[start] = (end, content)

        if clear:
            for pos in [p for p in self._right if start <= p < end]:
                del self._right[pos]
            for pos in [p for p in self._left if start < p <= end]:
                del self._left[pos]
