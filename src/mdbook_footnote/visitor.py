"""Walking and rewriting a Book.

``iter_chapters`` visits chapters depth-first, parents before their
sub-items. ``map_chapters`` is the immutable rewrite used by the
preprocessor: it applies a function to every chapter and rebuilds only
the parts of the tree that changed.

Example, expanding footnotes in every chapter:

    def expand(chapter: Chapter) -> Chapter:
        return dataclasses.replace(
            chapter, content=transform(chapter.content, config)
        )

    new_book = map_chapters(book, expand)

Thread Safety:
Both functions are pure. The input book is never modified.

"""

import dataclasses
from collections.abc import Callable, Iterable, Iterator

from mdbook_footnote.book import Book, BookItem, Chapter


def iter_chapters(items: Book | Iterable[BookItem]) -> Iterator[Chapter]:
    """Yield every chapter in the tree, depth-first, parents first."""
    if isinstance(items, Book):
        items = items.items
    for item in items:
        match item:
            case Chapter(sub_items=sub_items):
                yield item
                yield from iter_chapters(sub_items)
            case _:
                pass  # Separators and part titles hold no content


def map_chapters(book: Book, fn: Callable[[Chapter], Chapter]) -> Book:
    """Apply ``fn`` to every chapter, returning a new Book.

    ``fn`` is called top-down: it receives each chapter with its original
    sub-items, and the sub-items of whatever it returns are then mapped in
    turn. Separators and part titles are kept as they are.

    Args:
        book: The book to rewrite.
        fn: Function from a chapter to its replacement.

    Returns:
        A Book with the same structure. Unchanged subtrees are shared with
        the input.

    """
    new_items = _map_items(book.items, fn)
    if new_items == book.items:
        return book
    return dataclasses.replace(book, items=new_items)


def _map_items(
    items: tuple[BookItem, ...], fn: Callable[[Chapter], Chapter]
) -> tuple[BookItem, ...]:
    return tuple(_map_item(item, fn) for item in items)


def _map_item(item: BookItem, fn: Callable[[Chapter], Chapter]) -> BookItem:
    match item:
        case Chapter():
            mapped = fn(item)
            new_sub_items = _map_items(mapped.sub_items, fn)
            if new_sub_items != mapped.sub_items:
                return dataclasses.replace(mapped, sub_items=new_sub_items)
            return mapped
        case _:
            return item


__all__ = ["iter_chapters", "map_chapters"]
