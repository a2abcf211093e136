"""FootnoteRenderer protocol shared by both output styles.

A renderer is stateless: numbering lives in the caller, which hands the
renderer an index for each reference and the full entry list for the
trailing block.

Example:
    from mdbook_footnote.renderers import get_renderer

    renderer = get_renderer(FootnoteStyle.MARKDOWN)
    renderer.reference(1)            # '[^1]'
    renderer.render_footnotes(entries)

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from mdbook_footnote.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from mdbook_footnote.footnotes import FootnoteEntry


class FootnoteRenderer(Protocol):
    """Protocol for footnote output styles."""

    #: Text appended before the first entry of the trailing block.
    separator: str

    def reference(self, index: int) -> str:
        """Inline token that replaces the marker numbered ``index``."""
        ...

    def entry(self, entry: FootnoteEntry) -> str:
        """One item of the trailing block, including its leading blank line."""
        ...

    def render_footnotes(self, entries: Sequence[FootnoteEntry]) -> str:
        """Trailing block for ``entries``, or ``""`` when there are none."""
        ...


class BaseFootnoteRenderer:
    """Shared trailing-block assembly.

    Subclasses supply ``separator``, ``reference`` and ``entry``.

    """

    __slots__ = ()

    separator = ""

    def reference(self, index: int) -> str:
        raise NotImplementedError

    def entry(self, entry: FootnoteEntry) -> str:
        raise NotImplementedError

    def render_footnotes(self, entries: Sequence[FootnoteEntry]) -> str:
        if not entries:
            return ""
        sb = StringBuilder().append(self.separator)
        for entry in entries:
            sb.append(self.entry(entry))
        return sb.build()
