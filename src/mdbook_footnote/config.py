"""Footnote configuration.

The only knob is whether footnotes are emitted as native Markdown
(``[^1]`` references plus definitions) or as hyperlinked HTML anchors.
It is read once from ``book.toml`` before any chapter is processed:

    [preprocessor.footnote]
    markdown = true

Anything other than a real boolean (missing key, string, integer) falls
back to hyperlink output.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

#: Dotted book.toml key holding the markdown flag.
MARKDOWN_KEY = "preprocessor.footnote.markdown"


class FootnoteStyle(Enum):
    """Output style for inline references and the trailing block."""

    HYPERLINK = "hyperlink"
    MARKDOWN = "markdown"


@dataclass(frozen=True, slots=True)
class FootnoteConfig:
    """Immutable footnote configuration.

    Attributes:
        markdown: Emit native Markdown footnotes instead of HTML anchors

    """

    markdown: bool = False

    @property
    def style(self) -> FootnoteStyle:
        return FootnoteStyle.MARKDOWN if self.markdown else FootnoteStyle.HYPERLINK

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FootnoteConfig":
        """Create FootnoteConfig from the ``[preprocessor.footnote]`` table.

        Unknown keys are ignored. A ``markdown`` value that is not a bool
        is treated as absent.

        Example:
            >>> FootnoteConfig.from_dict({"markdown": True, "command": "x"})
            FootnoteConfig(markdown=True)
            >>> FootnoteConfig.from_dict({"markdown": "yes"})
            FootnoteConfig(markdown=False)

        """
        markdown = config_dict.get("markdown")
        return cls(markdown=markdown if isinstance(markdown, bool) else False)

    @classmethod
    def from_book_config(cls, book_config: Mapping[str, Any] | None) -> "FootnoteConfig":
        """Create FootnoteConfig from the whole book configuration.

        mdbook serializes book.toml as nested tables, so the key is looked up
        table by table. A flat ``"preprocessor.footnote.markdown"`` key is
        accepted too.

        Args:
            book_config: The ``config`` object from the preprocessor context.

        Returns:
            New FootnoteConfig, defaulting to hyperlink output.

        """
        if not book_config:
            return cls()
        value = lookup(book_config, MARKDOWN_KEY)
        return cls(markdown=value if isinstance(value, bool) else False)


def lookup(table: Mapping[str, Any], dotted_key: str) -> Any:
    """Resolve a dotted key through nested mappings, or None if missing."""
    if dotted_key in table:
        return table[dotted_key]
    current: Any = table
    for part in dotted_key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return None
        current = current[part]
    return current


__all__ = [
    "MARKDOWN_KEY",
    "FootnoteConfig",
    "FootnoteStyle",
    "lookup",
]
