"""Expand inline footnotes in one chapter body in both output styles."""

from mdbook_footnote import FootnoteConfig, transform

body = "Normal text{{footnote: Or is it?}} in body.{{footnote: Second\nline.}}"

print(transform(body, FootnoteConfig(markdown=False)))
print()
print(transform(body, FootnoteConfig(markdown=True)))
