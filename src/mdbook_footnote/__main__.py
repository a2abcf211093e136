"""Allow ``python -m mdbook_footnote``."""

from mdbook_footnote.cli import main

raise SystemExit(main())
