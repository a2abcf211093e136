"""Hyperlink footnote renderer.

Each reference is a superscript anchor that links down to its entry, and
each entry links back up to its reference:

    text<sup><a name="to-footnote-1">[1](#footnote-1)</a></sup>
    ---

    <a name="footnote-1">[1](#to-footnote-1)</a>: content

The link text itself is Markdown, so the output relies on the HTML
renderer running the chapter through a Markdown parser afterwards.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdbook_footnote.renderers.protocol import BaseFootnoteRenderer

if TYPE_CHECKING:
    from mdbook_footnote.footnotes import FootnoteEntry


class HyperlinkRenderer(BaseFootnoteRenderer):
    """Renders footnotes as paired HTML anchors."""

    __slots__ = ()

    separator = "\n---\n"

    def reference(self, index: int) -> str:
        return f'<sup><a name="to-footnote-{index}">[{index}](#footnote-{index})</a></sup>'

    def entry(self, entry: FootnoteEntry) -> str:
        index = entry.index
        return f'\n\n<a name="footnote-{index}">[{index}](#to-footnote-{index})</a>: {entry.content}'
