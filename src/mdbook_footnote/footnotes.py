"""Per-chapter footnote expansion.

``transform`` is the whole rewrite for one chapter body: scan markers,
number them from 1, substitute each marker with its reference and append
the footnote block. It is a pure function of ``(body, config)``; the
entry list lives only for the duration of one call.

Example:
    >>> from mdbook_footnote.config import FootnoteConfig
    >>> transform("A{{footnote: one}}B", FootnoteConfig(markdown=True))
    'A[^1]B<p><hr/>\\n\\n\\n[^1]: one'

"""

from dataclasses import dataclass

from mdbook_footnote.config import FootnoteConfig
from mdbook_footnote.renderers import get_renderer
from mdbook_footnote.scanner import scan_markers
from mdbook_footnote.stringbuilder import StringBuilder


@dataclass(frozen=True, slots=True)
class FootnoteEntry:
    """A footnote collected from one chapter.

    Attributes:
        index: 1-based position among the chapter's markers
        content: Raw marker content (may contain markup and newlines)

    """

    index: int
    content: str


def collect_footnotes(body: str) -> list[FootnoteEntry]:
    """Return the entries ``body`` would produce, in marker order."""
    return [
        FootnoteEntry(index=index, content=marker.content)
        for index, marker in enumerate(scan_markers(body), start=1)
    ]


def transform(body: str, config: FootnoteConfig) -> str:
    """Expand every footnote marker in a chapter body.

    Args:
        body: Chapter source text
        config: Output style selection

    Returns:
        The rewritten body. Bodies without markers are returned unchanged.

    """
    renderer = get_renderer(config.style)
    entries: list[FootnoteEntry] = []
    sb = StringBuilder()
    pos = 0

    for marker in scan_markers(body):
        entry = FootnoteEntry(index=len(entries) + 1, content=marker.content)
        entries.append(entry)
        sb.append(body[pos : marker.start])
        sb.append(renderer.reference(entry.index))
        pos = marker.end

    if not entries:
        return body

    sb.append(body[pos:])
    sb.append(renderer.render_footnotes(entries))
    return sb.build()


__all__ = ["FootnoteEntry", "collect_footnotes", "transform"]
