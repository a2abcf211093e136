"""StringBuilder for assembling rewritten chapter bodies.

A chapter body is rebuilt from many small pieces: the text between
markers, one reference per marker, then the footnote block. Pieces are
appended to a list and joined once.

Thread Safety:
StringBuilder instances are local to each transform() call.

"""

from __future__ import annotations


class StringBuilder:
    """List-backed string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("Text").append("[^1]")
            >>> sb.build()
            'Text[^1]'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a piece (empty strings are skipped) and return self."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all pieces into the final string."""
        return "".join(self._parts)
