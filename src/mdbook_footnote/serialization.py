"""mdbook JSON serialization for books and preprocessor contexts.

mdbook runs a preprocessor with ``[context, book]`` as a JSON array on
stdin and reads the processed book back from stdout. Book items use
serde's externally tagged layout:

    {"Chapter": {"name": ..., "content": ..., "sub_items": [...], ...}}
    "Separator"
    {"PartTitle": "Part I"}

Unknown keys on the book, chapters and context are carried through in
``extra`` so that output matches input apart from chapter contents.

Example:
    ctx, book = parse_input(sys.stdin.read())
    sys.stdout.write(book_to_json(book))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from mdbook_footnote.book import Book, BookItem, Chapter, PartTitle, Separator
from mdbook_footnote.context import PreprocessorContext
from mdbook_footnote.errors import BookFormatError

# Book keys holding the top-level items, newest first
_ITEMS_KEYS = ("items", "sections")

_CHAPTER_FIELDS = frozenset(
    {"name", "content", "number", "sub_items", "path", "source_path", "parent_names"}
)
_CONTEXT_FIELDS = frozenset({"root", "config", "renderer", "mdbook_version"})


# =============================================================================
# Input
# =============================================================================


def parse_input(text: str) -> tuple[PreprocessorContext, Book]:
    """Parse the ``[context, book]`` array mdbook writes to stdin.

    Raises:
        BookFormatError: If the text is not JSON or has the wrong shape.

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
        raise BookFormatError(msg) from e

    if not isinstance(data, list) or len(data) != 2:
        raise BookFormatError("expected a JSON array of [context, book]")

    return context_from_dict(data[0]), book_from_dict(data[1])


def context_from_dict(data: Any) -> PreprocessorContext:
    """Build a PreprocessorContext from its JSON object."""
    _expect(data, dict, "context")
    config = data.get("config", {})
    _expect(config, dict, "context.config")
    for key in ("root", "renderer", "mdbook_version"):
        if key in data:
            _expect(data[key], str, f"context.{key}")

    return PreprocessorContext(
        root=data.get("root", ""),
        config=config,
        renderer=data.get("renderer", "html"),
        mdbook_version=data.get("mdbook_version", ""),
        extra={k: v for k, v in data.items() if k not in _CONTEXT_FIELDS},
    )


def book_from_dict(data: Any) -> Book:
    """Build a Book from its JSON object.

    Raises:
        BookFormatError: If the book or any item is malformed.

    """
    _expect(data, dict, "book")
    items_key = next((key for key in _ITEMS_KEYS if key in data), None)
    if items_key is None:
        raise BookFormatError("book has neither 'sections' nor 'items'", path="book")

    raw_items = data[items_key]
    _expect(raw_items, list, items_key)

    return Book(
        items=_items_from_list(raw_items, items_key),
        items_key=items_key,
        extra={k: v for k, v in data.items() if k != items_key},
    )


def _items_from_list(raw_items: list[Any], path: str) -> tuple[BookItem, ...]:
    return tuple(_item_from_value(raw, f"{path}[{i}]") for i, raw in enumerate(raw_items))


def _item_from_value(raw: Any, path: str) -> BookItem:
    if raw == "Separator":
        return Separator()
    if isinstance(raw, dict) and len(raw) == 1:
        ((tag, value),) = raw.items()
        if tag == "Chapter":
            return _chapter_from_dict(value, f"{path}.Chapter")
        if tag == "PartTitle":
            _expect(value, str, f"{path}.PartTitle")
            return PartTitle(title=value)
    raise BookFormatError(f"unknown book item {raw!r}", path=path)


def _chapter_from_dict(data: Any, path: str) -> Chapter:
    _expect(data, dict, path)
    if "name" not in data:
        raise BookFormatError("chapter has no 'name'", path=path)
    _expect(data["name"], str, f"{path}.name")
    content = data.get("content", "")
    _expect(content, str, f"{path}.content")

    number = data.get("number")
    if number is not None:
        _expect(number, list, f"{path}.number")
        if not all(isinstance(n, int) and not isinstance(n, bool) for n in number):
            raise BookFormatError("section number must be a list of integers", path=f"{path}.number")
        number = tuple(number)

    sub_items = data.get("sub_items", [])
    _expect(sub_items, list, f"{path}.sub_items")

    parent_names = data.get("parent_names", [])
    _expect(parent_names, list, f"{path}.parent_names")

    for key in ("path", "source_path"):
        if data.get(key) is not None:
            _expect(data[key], str, f"{path}.{key}")

    return Chapter(
        name=data["name"],
        content=content,
        number=number,
        sub_items=_items_from_list(sub_items, f"{path}.sub_items"),
        path=data.get("path"),
        source_path=data.get("source_path"),
        parent_names=tuple(parent_names),
        extra={k: v for k, v in data.items() if k not in _CHAPTER_FIELDS},
    )


def _expect(value: Any, expected: type, path: str) -> None:
    if not isinstance(value, expected):
        msg = f"expected {expected.__name__}, got {type(value).__name__}"
        raise BookFormatError(msg, path=path)


# =============================================================================
# Output
# =============================================================================


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a Book to the JSON object mdbook expects back."""
    return {
        book.items_key: [_item_to_value(item) for item in book.items],
        **book.extra,
    }


def _item_to_value(item: BookItem) -> Any:
    match item:
        case Chapter():
            return {"Chapter": _chapter_to_dict(item)}
        case PartTitle(title=title):
            return {"PartTitle": title}
        case Separator():
            return "Separator"
    msg = f"Unknown book item type: {type(item).__name__}"
    raise TypeError(msg)


def _chapter_to_dict(chapter: Chapter) -> dict[str, Any]:
    return {
        "name": chapter.name,
        "content": chapter.content,
        "number": list(chapter.number) if chapter.number is not None else None,
        "sub_items": [_item_to_value(item) for item in chapter.sub_items],
        "path": chapter.path,
        "source_path": chapter.source_path,
        "parent_names": list(chapter.parent_names),
        **chapter.extra,
    }


def book_to_json(book: Book) -> str:
    """Serialize a Book to a JSON string."""
    return json.dumps(book_to_dict(book), ensure_ascii=False)


__all__ = [
    "book_from_dict",
    "book_to_dict",
    "book_to_json",
    "context_from_dict",
    "parse_input",
]
