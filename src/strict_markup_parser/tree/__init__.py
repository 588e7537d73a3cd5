"""Document tree model for strict markup parsing.

Key Components:
    Text: Raw character data
    Element: Tag name, attributes and ordered children
    Comment: Comment body without delimiters
    text, element, comment: Constructor functions
"""

from .nodes import (
    Comment,
    Element,
    Node,
    NodeKind,
    Text,
    comment,
    element,
    node_kind,
    text,
)

__all__ = [
    "Comment",
    "Element",
    "Node",
    "NodeKind",
    "Text",
    "comment",
    "element",
    "node_kind",
    "text",
]
