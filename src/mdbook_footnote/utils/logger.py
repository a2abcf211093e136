"""Logging helper for mdbook-footnote.

Wraps the standard library logging with a package-wide name prefix. The
library never installs handlers; the command-line entry point does.

Example:
    >>> from mdbook_footnote.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Renderer %r may not understand HTML", "pdf")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "mdbook_footnote"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``mdbook_footnote``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("preprocessor").name
        'mdbook_footnote.preprocessor'
        >>> get_logger("mdbook_footnote.cli").name
        'mdbook_footnote.cli'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
