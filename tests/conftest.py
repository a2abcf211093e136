"""Shared fixtures: mdbook preprocessor input as mdbook 0.4 sends it."""

from __future__ import annotations

import json
from typing import Any

import pytest


def make_chapter(
    name: str,
    content: str,
    number: list[int] | None = None,
    sub_items: list[Any] | None = None,
    parent_names: list[str] | None = None,
) -> dict[str, Any]:
    path = f"{name.lower().replace(' ', '-')}.md"
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": sub_items or [],
            "path": path,
            "source_path": path,
            "parent_names": parent_names or [],
        }
    }


@pytest.fixture
def book_json() -> dict[str, Any]:
    return {
        "sections": [
            make_chapter("Intro", "Welcome.{{footnote: Hi.}}"),
            {"PartTitle": "Part One"},
            make_chapter(
                "Chapter 1",
                "First{{footnote: a}} and second{{footnote: b}}.",
                number=[1],
                sub_items=[
                    make_chapter(
                        "Section 1.1",
                        "Nested{{footnote: restart}}",
                        number=[1, 1],
                        parent_names=["Chapter 1"],
                    ),
                ],
            ),
            "Separator",
            make_chapter("Plain", "Nothing to see.", number=[2]),
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def context_json() -> dict[str, Any]:
    return {
        "root": "/tmp/book",
        "config": {
            "book": {"authors": [], "language": "en", "src": "src", "title": "Test"},
            "preprocessor": {"footnote": {"command": "mdbook-footnote"}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }


@pytest.fixture
def stdin_payload(context_json: dict[str, Any], book_json: dict[str, Any]) -> str:
    return json.dumps([context_json, book_json])
