"""Footnote marker scanner.

Finds ``{{footnote: ...}}`` markers in a chapter body.

Marker grammar:
    ``{{footnote:`` optional whitespace, content, ``}}``

The content is matched lazily across newlines and ends at the first
``}}``. There is no escape for a literal ``}}`` inside a footnote. Leading
whitespace after the colon is dropped; trailing whitespace is kept.
An opening token with no closing token never matches and stays in the
text as written.

Thread Safety:
The compiled pattern is immutable and shared by all scans.

"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

FOOTNOTE_RE = re.compile(r"\{\{footnote:\s*(?P<content>.*?)\}\}", re.DOTALL)


@dataclass(frozen=True, slots=True)
class Marker:
    """One matched footnote marker.

    Attributes:
        content: Text between the opening token and ``}}``
        start: Offset of ``{{`` in the body
        end: Offset just past ``}}``

    """

    content: str
    start: int
    end: int


def scan_markers(body: str) -> Iterator[Marker]:
    """Yield every marker in ``body``, left to right, without overlap.

    Example:
        >>> [m.content for m in scan_markers("a{{footnote: x}}b{{footnote:y }}")]
        ['x', 'y ']

    """
    for match in FOOTNOTE_RE.finditer(body):
        yield Marker(content=match.group("content"), start=match.start(), end=match.end())


def has_markers(body: str) -> bool:
    """Return True if ``body`` contains at least one complete marker."""
    return FOOTNOTE_RE.search(body) is not None


__all__ = ["FOOTNOTE_RE", "Marker", "has_markers", "scan_markers"]
