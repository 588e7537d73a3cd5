"""Strict Markup Parser.

A small recursive-descent parser that turns well-formed angle-bracket markup
into an immutable tree of text, element and comment nodes. Malformed input is
rejected with a MalformedMarkupError; there is no error recovery.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Configured parser - StrictMarkupParser class
- Level 3: Grammar access - MarkupParser with parse_document() metrics
"""

__version__ = "0.1.0"
__author__ = "Strict Markup Parser Team"

from .api import (
    StrictMarkupParser,
    parse,
    parse_document,
    parse_file,
    parse_string,
    to_dict,
    to_json,
)
from .grammar import MarkupParser
from .shared import MalformedMarkupError, ParseResult, ParserConfig
from .tree import Comment, Element, Node, Text

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",
    "parse_file",
    "parse_document",

    # Level 2: Configured parser class
    "StrictMarkupParser",

    # Level 3: Grammar
    "MarkupParser",

    # Tree model and results
    "Comment",
    "Element",
    "Node",
    "Text",
    "ParseResult",

    # Configuration and errors
    "ParserConfig",
    "MalformedMarkupError",

    # Adapters
    "to_dict",
    "to_json",
]
