"""Run the preprocessor on a book in mdbook's JSON layout without mdbook."""

import json

from mdbook_footnote import FootnotePreprocessor, book_to_json, parse_input

payload = json.dumps(
    [
        {
            "root": ".",
            "config": {"preprocessor": {"footnote": {"markdown": True}}},
            "renderer": "html",
            "mdbook_version": "0.4.40",
        },
        {
            "sections": [
                {
                    "Chapter": {
                        "name": "Intro",
                        "content": "Hello{{footnote: world}}",
                        "number": [1],
                        "sub_items": [],
                        "path": "intro.md",
                        "source_path": "intro.md",
                        "parent_names": [],
                    }
                }
            ],
            "__non_exhaustive": None,
        },
    ]
)

ctx, book = parse_input(payload)
print(book_to_json(FootnotePreprocessor().run(ctx, book)))
