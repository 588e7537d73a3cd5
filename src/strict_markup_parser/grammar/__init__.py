"""Grammar layer for strict markup parsing.

This module provides the recursive-descent parser that turns markup text into
a document tree, failing immediately on the first grammar violation.
"""

from .parser import (
    CLOSING_TAG_OPEN,
    COMMENT_CLOSE,
    COMMENT_OPEN,
    QUOTES,
    TAG_CLOSE,
    TAG_OPEN,
    MarkupParser,
)

__all__ = [
    "CLOSING_TAG_OPEN",
    "COMMENT_CLOSE",
    "COMMENT_OPEN",
    "QUOTES",
    "TAG_CLOSE",
    "TAG_OPEN",
    "MarkupParser",
]
