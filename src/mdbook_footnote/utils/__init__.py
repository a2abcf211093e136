"""Utility modules for mdbook-footnote.

Provides:
- logger: get_logger for namespaced logging
"""

from mdbook_footnote.utils.logger import get_logger

__all__ = ["get_logger"]
