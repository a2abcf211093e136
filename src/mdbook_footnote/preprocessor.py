"""The footnote preprocessor.

Ties the pieces together for one mdbook build: resolve the output style
from the book configuration, expand footnotes in every chapter and hand
the book back.

Usage:
    >>> from mdbook_footnote import FootnotePreprocessor
    >>> pre = FootnotePreprocessor()
    >>> new_book = pre.run(ctx, book)
    >>> pre.supports_renderer("html")
    True

Thread Safety:
A FootnotePreprocessor holds only its frozen config, so one instance can
process several books concurrently.

"""

from __future__ import annotations

import dataclasses

from mdbook_footnote.book import Book, Chapter
from mdbook_footnote.config import FootnoteConfig
from mdbook_footnote.context import PreprocessorContext
from mdbook_footnote.footnotes import transform
from mdbook_footnote.utils.logger import get_logger
from mdbook_footnote.visitor import map_chapters

logger = get_logger(__name__)

#: mdbook release this preprocessor is built against.
MDBOOK_VERSION = "0.4.40"

#: Renderers known to turn the hyperlink style's inline HTML into links.
HTML_RENDERERS = frozenset({"html", "epub"})

#: Renderer name the mdbook test suite uses to probe for unsupported renderers.
UNSUPPORTED_RENDERER = "not-supported"


class FootnotePreprocessor:
    """Expands ``{{footnote: ...}}`` markers in every chapter of a book.

    Args:
        config: Fixed configuration. When None, it is read from the
            context's book configuration on each run.

    """

    name = "footnote-preprocessor"

    def __init__(self, config: FootnoteConfig | None = None) -> None:
        self._config = config

    def resolve_config(self, ctx: PreprocessorContext | None) -> FootnoteConfig:
        """Return the explicit config, or the one described by ``ctx``."""
        if self._config is not None:
            return self._config
        if ctx is None:
            return FootnoteConfig()
        return FootnoteConfig.from_book_config(ctx.config)

    def run(self, ctx: PreprocessorContext | None, book: Book) -> Book:
        """Expand footnotes in every chapter of ``book``.

        Args:
            ctx: Build context from mdbook (may be None outside mdbook)
            book: The book to process

        Returns:
            A structurally identical book with rewritten chapter contents.

        """
        config = self.resolve_config(ctx)

        if ctx is not None and not config.markdown and ctx.renderer not in HTML_RENDERERS:
            logger.warning(
                "%s emits HTML footnote links, but renderer %r may not render HTML; "
                "set preprocessor.footnote.markdown = true for Markdown footnotes",
                self.name,
                ctx.renderer,
            )

        expanded = 0

        def expand(chapter: Chapter) -> Chapter:
            nonlocal expanded
            content = transform(chapter.content, config)
            if content is chapter.content:
                return chapter
            expanded += 1
            return dataclasses.replace(chapter, content=content)

        result = map_chapters(book, expand)
        logger.debug(
            "Expanded footnotes in %d chapter(s) using %s style",
            expanded,
            config.style.value,
        )
        return result

    def supports_renderer(self, renderer: str) -> bool:
        """Whether this preprocessor should run for ``renderer``.

        Output is plain Markdown/HTML text, so every renderer is accepted
        except mdbook's ``"not-supported"`` probe.

        """
        return renderer != UNSUPPORTED_RENDERER


def check_mdbook_version(version: str) -> bool:
    """Warn when the calling mdbook differs from MDBOOK_VERSION.

    Only major.minor is compared; patch releases do not change the
    preprocessor protocol.

    Returns:
        True if the versions are compatible. A mismatch is logged and
        processing carries on regardless.

    """
    if _major_minor(version) == _major_minor(MDBOOK_VERSION):
        return True
    logger.warning(
        "The %s plugin was built against version %s of mdbook, "
        "but we're being called from version %s",
        FootnotePreprocessor.name,
        MDBOOK_VERSION,
        version or "<unknown>",
    )
    return False


def _major_minor(version: str) -> tuple[str, ...]:
    return tuple(version.lstrip("v").split(".")[:2])


__all__ = [
    "HTML_RENDERERS",
    "MDBOOK_VERSION",
    "UNSUPPORTED_RENDERER",
    "FootnotePreprocessor",
    "check_mdbook_version",
]
