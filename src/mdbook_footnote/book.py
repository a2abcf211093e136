"""Typed model of an mdbook book.

Mirrors the structure mdbook hands to preprocessors:

Book
└── items: tuple[BookItem, ...]
    ├── Chapter (content + nested sub_items)
    ├── Separator
    └── PartTitle

All items are frozen dataclasses with slots. Rewriting a chapter means
building a new one with ``dataclasses.replace``; see
``mdbook_footnote.visitor.map_chapters``.

Keys mdbook sends that this model does not name are kept in ``extra`` so
a book can be written back without losing anything.

Thread Safety:
All items are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter: one document unit with a Markdown body.

    Attributes:
        name: Chapter title from SUMMARY.md
        content: Markdown source, the only field footnote expansion touches
        number: Section number (``(1, 2)`` for "1.2."), None for
            prefix/suffix chapters
        sub_items: Nested items under this chapter
        path: Path relative to the source directory, None for drafts
        source_path: Original source path, None for drafts
        parent_names: Titles of enclosing chapters, outermost first
        extra: Unrecognised keys, preserved verbatim

    """

    name: str
    content: str = ""
    number: tuple[int, ...] | None = None
    sub_items: tuple[BookItem, ...] = ()
    path: str | None = None
    source_path: str | None = None
    parent_names: tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_draft(self) -> bool:
        return self.path is None


@dataclass(frozen=True, slots=True)
class Separator:
    """A horizontal separator in the table of contents."""


@dataclass(frozen=True, slots=True)
class PartTitle:
    """A part heading in the table of contents."""

    title: str


type BookItem = Chapter | Separator | PartTitle


@dataclass(frozen=True, slots=True)
class Book:
    """Root of the document tree.

    Attributes:
        items: Top-level items in SUMMARY.md order
        items_key: JSON key the items were read from (``"sections"`` for
            mdbook 0.4, ``"items"`` for 0.5)
        extra: Unrecognised top-level keys such as ``__non_exhaustive``

    """

    items: tuple[BookItem, ...] = ()
    items_key: str = "sections"
    extra: Mapping[str, Any] = field(default_factory=dict)


__all__ = ["Book", "BookItem", "Chapter", "PartTitle", "Separator"]
