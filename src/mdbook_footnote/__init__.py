"""
mdbook-footnote: numbered footnotes for mdbook

Write footnotes inline and let the preprocessor number them per chapter:

    Normal text{{footnote: Or is it?}} in body.

Each marker becomes a reference and the footnote text is collected into a
block at the end of the chapter.

Quick Start:
    >>> from mdbook_footnote import FootnoteConfig, transform
    >>> transform("Hi{{footnote: there}}", FootnoteConfig(markdown=True))
    'Hi[^1]<p><hr/>\\n\\n\\n[^1]: there'

As an mdbook preprocessor (book.toml):

    [preprocessor.footnote]
    command = "mdbook-footnote"
    markdown = false   # true for native [^N] footnotes

Installation:
    pip install mdbook-footnote      # zero runtime dependencies
"""

from mdbook_footnote.book import Book, BookItem, Chapter, PartTitle, Separator
from mdbook_footnote.config import FootnoteConfig, FootnoteStyle
from mdbook_footnote.context import PreprocessorContext
from mdbook_footnote.errors import BookFormatError, FootnoteError
from mdbook_footnote.footnotes import FootnoteEntry, collect_footnotes, transform
from mdbook_footnote.preprocessor import FootnotePreprocessor, check_mdbook_version
from mdbook_footnote.renderers import HyperlinkRenderer, MarkdownRenderer, get_renderer
from mdbook_footnote.scanner import FOOTNOTE_RE, Marker, scan_markers
from mdbook_footnote.serialization import book_from_dict, book_to_dict, book_to_json, parse_input
from mdbook_footnote.visitor import iter_chapters, map_chapters

__version__ = "0.1.0"

__all__ = [
    "FOOTNOTE_RE",
    "Book",
    "BookFormatError",
    "BookItem",
    "Chapter",
    "FootnoteConfig",
    "FootnoteEntry",
    "FootnoteError",
    "FootnotePreprocessor",
    "FootnoteStyle",
    "HyperlinkRenderer",
    "Marker",
    "MarkdownRenderer",
    "PartTitle",
    "PreprocessorContext",
    "Separator",
    "__version__",
    "book_from_dict",
    "book_to_dict",
    "book_to_json",
    "check_mdbook_version",
    "collect_footnotes",
    "get_renderer",
    "iter_chapters",
    "map_chapters",
    "parse_input",
    "scan_markers",
    "transform",
]
