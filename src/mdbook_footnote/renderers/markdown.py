"""Native Markdown footnote renderer.

Emits ``[^N]`` references and ``[^N]: content`` definitions, leaving the
final footnote layout to a renderer that understands Markdown footnotes.
A horizontal rule precedes the definitions.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdbook_footnote.renderers.protocol import BaseFootnoteRenderer

if TYPE_CHECKING:
    from mdbook_footnote.footnotes import FootnoteEntry


class MarkdownRenderer(BaseFootnoteRenderer):
    """Renders footnotes with Markdown footnote syntax."""

    __slots__ = ()

    separator = "<p><hr/>\n"

    def reference(self, index: int) -> str:
        return f"[^{index}]"

    def entry(self, entry: FootnoteEntry) -> str:
        return f"\n\n[^{entry.index}]: {entry.content}"
