"""Footnote renderers.

Available Renderers:
- HyperlinkRenderer: superscript HTML anchors with back-links (default)
- MarkdownRenderer: native ``[^N]`` Markdown footnotes

Thread Safety:
Renderers hold no state. The instances returned by get_renderer() are
shared module-level singletons.

"""

from mdbook_footnote.config import FootnoteStyle
from mdbook_footnote.renderers.html import HyperlinkRenderer
from mdbook_footnote.renderers.markdown import MarkdownRenderer
from mdbook_footnote.renderers.protocol import BaseFootnoteRenderer, FootnoteRenderer

_RENDERERS: dict[FootnoteStyle, FootnoteRenderer] = {
    FootnoteStyle.HYPERLINK: HyperlinkRenderer(),
    FootnoteStyle.MARKDOWN: MarkdownRenderer(),
}


def get_renderer(style: FootnoteStyle) -> FootnoteRenderer:
    """Return the shared renderer for ``style``."""
    return _RENDERERS[style]


__all__ = [
    "BaseFootnoteRenderer",
    "FootnoteRenderer",
    "HyperlinkRenderer",
    "MarkdownRenderer",
    "get_renderer",
]
