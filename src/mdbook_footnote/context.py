"""Preprocessor context passed in by mdbook alongside the book."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class PreprocessorContext:
    """What mdbook tells a preprocessor about the current build.

    Attributes:
        root: Book root directory
        config: Parsed book.toml as nested tables
        renderer: Name of the renderer this build is for (``"html"``, ...)
        mdbook_version: Version of the calling mdbook
        extra: Unrecognised keys, preserved verbatim

    """

    root: str = ""
    config: Mapping[str, Any] = field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)


__all__ = ["PreprocessorContext"]
