"""Tests for book traversal and the immutable chapter rewrite."""

import dataclasses

from mdbook_footnote.book import Book, Chapter, PartTitle, Separator
from mdbook_footnote.visitor import iter_chapters, map_chapters


def _book() -> Book:
    return Book(
        items=(
            Chapter(name="Intro", content="intro"),
            PartTitle(title="Part I"),
            Chapter(
                name="One",
                content="one",
                number=(1,),
                sub_items=(
                    Chapter(name="One.A", content="one-a", number=(1, 1)),
                    Separator(),
                    Chapter(
                        name="One.B",
                        content="one-b",
                        number=(1, 2),
                        sub_items=(Chapter(name="One.B.i", content="deep", number=(1, 2, 1)),),
                    ),
                ),
            ),
            Separator(),
        )
    )


def _upper(chapter: Chapter) -> Chapter:
    return dataclasses.replace(chapter, content=chapter.content.upper())


class TestIterChapters:
    """Depth-first chapter iteration."""

    def test_order(self) -> None:
        names = [c.name for c in iter_chapters(_book())]
        assert names == ["Intro", "One", "One.A", "One.B", "One.B.i"]

    def test_accepts_item_sequence(self) -> None:
        names = [c.name for c in iter_chapters(_book().items[:1])]
        assert names == ["Intro"]

    def test_empty_book(self) -> None:
        assert list(iter_chapters(Book())) == []


class TestMapChapters:
    """Immutable rebuild of the tree."""

    def test_every_chapter_rewritten(self) -> None:
        result = map_chapters(_book(), _upper)
        assert [c.content for c in iter_chapters(result)] == [
            "INTRO",
            "ONE",
            "ONE-A",
            "ONE-B",
            "DEEP",
        ]

    def test_structure_preserved(self) -> None:
        book = _book()
        result = map_chapters(book, _upper)
        assert len(result.items) == len(book.items)
        assert result.items[1] == PartTitle(title="Part I")
        assert isinstance(result.items[3], Separator)
        one = result.items[2]
        assert isinstance(one, Chapter)
        assert one.number == (1,)
        assert isinstance(one.sub_items[1], Separator)

    def test_original_untouched(self) -> None:
        book = _book()
        map_chapters(book, _upper)
        assert book == _book()

    def test_identity_returns_same_book(self) -> None:
        book = _book()
        assert map_chapters(book, lambda c: c) is book

    def test_book_metadata_kept(self) -> None:
        book = dataclasses.replace(_book(), items_key="items", extra={"x": 1})
        result = map_chapters(book, _upper)
        assert result.items_key == "items"
        assert result.extra == {"x": 1}
