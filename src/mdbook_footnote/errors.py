"""Exception classes for mdbook-footnote.

Footnote expansion itself cannot fail: a marker either matches or is left
as literal text. Everything here belongs to the host boundary (reading the
book and context that mdbook pipes in).
"""

from __future__ import annotations


class FootnoteError(Exception):
    """Base exception for all mdbook-footnote errors."""

    pass


class BookFormatError(FootnoteError):
    """The preprocessor input could not be understood.

    Raised for invalid JSON or for a book/context whose shape does not
    match what mdbook sends.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize with an optional location inside the input.

        Args:
            message: Error description
            path: Dotted/indexed location of the bad value, e.g.
                ``sections[2].Chapter.sub_items[0]``
        """
        self.message = message
        self.path = path

        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")
