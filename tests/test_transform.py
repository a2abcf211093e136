"""Tests for per-chapter footnote expansion."""

import pytest

from mdbook_footnote.config import FootnoteConfig
from mdbook_footnote.footnotes import FootnoteEntry, collect_footnotes, transform

HYPERLINK = FootnoteConfig(markdown=False)
MARKDOWN = FootnoteConfig(markdown=True)


class TestScenarios:
    """End-to-end expansions of a small body."""

    def test_hyperlink_two_footnotes(self) -> None:
        result = transform("A{{footnote: one}}B{{footnote: two}}C", HYPERLINK)
        assert result == (
            'A<sup><a name="to-footnote-1">[1](#footnote-1)</a></sup>'
            'B<sup><a name="to-footnote-2">[2](#footnote-2)</a></sup>'
            "C\n---\n"
            '\n\n<a name="footnote-1">[1](#to-footnote-1)</a>: one'
            '\n\n<a name="footnote-2">[2](#to-footnote-2)</a>: two'
        )

    def test_markdown_two_footnotes(self) -> None:
        result = transform("A{{footnote: one}}B{{footnote: two}}C", MARKDOWN)
        assert result == "A[^1]B[^2]C<p><hr/>\n\n\n[^1]: one\n\n[^2]: two"

    def test_readme_example(self) -> None:
        result = transform("Normal text{{footnote: Or is it?}} in body.", MARKDOWN)
        assert result == "Normal text[^1] in body.<p><hr/>\n\n\n[^1]: Or is it?"


class TestEdgeCases:
    """Bodies at the edges of the marker grammar."""

    @pytest.mark.parametrize("config", [HYPERLINK, MARKDOWN])
    def test_no_markers_unchanged(self, config: FootnoteConfig) -> None:
        body = "# Chapter\n\nNo notes here, just {{other}} template syntax.\n"
        assert transform(body, config) == body

    def test_empty_string(self) -> None:
        assert transform("", HYPERLINK) == ""

    @pytest.mark.parametrize("config", [HYPERLINK, MARKDOWN])
    def test_unterminated_marker_passes_through(self, config: FootnoteConfig) -> None:
        body = "Text {{footnote: oops"
        assert transform(body, config) == body

    def test_empty_content(self) -> None:
        assert transform("x{{footnote:}}", MARKDOWN) == "x[^1]<p><hr/>\n\n\n[^1]: "

    def test_multiline_content(self) -> None:
        result = transform("a{{footnote: line one\nline two}}", MARKDOWN)
        assert result == "a[^1]<p><hr/>\n\n\n[^1]: line one\nline two"

    def test_marker_only_body(self) -> None:
        assert transform("{{footnote: x}}", MARKDOWN) == "[^1]<p><hr/>\n\n\n[^1]: x"

    def test_no_marker_survives(self) -> None:
        body = "{{footnote: a}}\n\n{{footnote:\nb\n}}\n{{footnote:}}"
        for config in (HYPERLINK, MARKDOWN):
            assert "{{footnote:" not in transform(body, config)

    def test_unterminated_after_valid_marker(self) -> None:
        result = transform("a{{footnote: b}} {{footnote: c", MARKDOWN)
        assert result == "a[^1] {{footnote: c<p><hr/>\n\n\n[^1]: b"

    def test_numbering_restarts_per_call(self) -> None:
        first = transform("{{footnote: a}}", MARKDOWN)
        second = transform("{{footnote: b}}", MARKDOWN)
        assert first.startswith("[^1]")
        assert second.startswith("[^1]")

    def test_deterministic(self) -> None:
        body = "x{{footnote: 1}}y{{footnote: 2}}z"
        assert transform(body, HYPERLINK) == transform(body, HYPERLINK)

    def test_unmatched_body_returned_as_is(self) -> None:
        body = "no markers"
        assert transform(body, MARKDOWN) is body


class TestCollectFootnotes:
    """Inspecting the entries a body produces."""

    def test_entries_in_order(self) -> None:
        assert collect_footnotes("{{footnote: a}}{{footnote: b}}") == [
            FootnoteEntry(index=1, content="a"),
            FootnoteEntry(index=2, content="b"),
        ]

    def test_empty_content_entry(self) -> None:
        assert collect_footnotes("{{footnote:}}") == [FootnoteEntry(index=1, content="")]

    def test_no_entries(self) -> None:
        assert collect_footnotes("nothing") == []
