"""Public API for strict markup parsing.

Level 1: module functions - parse(), parse_string(), parse_file()
Level 2: configured parser - StrictMarkupParser
Adapters: to_dict(), from_dict(), to_json(), to_lxml()
"""

from .adapters import from_dict, is_lxml_available, to_dict, to_json, to_lxml
from .parser import (
    StrictMarkupParser,
    parse,
    parse_document,
    parse_file,
    parse_string,
)

__all__ = [
    "StrictMarkupParser",
    "parse",
    "parse_document",
    "parse_file",
    "parse_string",
    "from_dict",
    "is_lxml_available",
    "to_dict",
    "to_json",
    "to_lxml",
]
