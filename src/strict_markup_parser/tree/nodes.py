"""Immutable document tree produced by the markup parser.

A document is a tree of three node variants: :class:`Text`, :class:`Element`
and :class:`Comment`. Nodes are fully populated when constructed and never
change afterwards; children are stored as tuples and attributes as read-only
mappings.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union


class NodeKind(Enum):
    """Variant tag for document nodes."""

    TEXT = auto()
    ELEMENT = auto()
    COMMENT = auto()


@dataclass(frozen=True)
class Text:
    """Raw character data between tags (entities are not decoded)."""

    data: str

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            raise TypeError("Text data must be a string")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT


@dataclass(frozen=True)
class Comment:
    """Literal content between ``<!--`` and ``-->``."""

    data: str

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            raise TypeError("Comment data must be a string")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.COMMENT


@dataclass(frozen=True)
class Element:
    """Tagged node with attributes and ordered children.

    ``attributes`` is copied on construction and exposed read-only, so later
    changes to the mapping passed in do not leak into the tree.
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        """Validate values and freeze the attribute and child containers."""
        if not isinstance(self.tag, str):
            raise TypeError("Element tag must be a string")

        attributes = dict(self.attributes)
        for name, value in attributes.items():
            if not isinstance(name, str) or not isinstance(value, str):
                raise TypeError("Attribute name and value must be strings")

        children = tuple(self.children)
        for child in children:
            if not isinstance(child, (Text, Element, Comment)):
                raise TypeError(
                    f"Child must be a Text, Element or Comment node, "
                    f"got {type(child).__name__}"
                )

        object.__setattr__(self, "attributes", MappingProxyType(attributes))
        object.__setattr__(self, "children", children)

    def __hash__(self) -> int:
        return hash((self.tag, frozenset(self.attributes.items()), self.children))

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT

    @property
    def element_children(self) -> List["Element"]:
        """Direct children that are elements."""
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def text_content(self) -> str:
        """Concatenated data of all descendant text nodes, in document order."""
        return "".join(
            node.data for node in self.iter() if isinstance(node, Text)
        )

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    def iter(self) -> Iterator["Node"]:
        """Yield this element and every descendant node in document order."""
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Element):
                stack.extend(reversed(node.children))

    def find(self, tag: str) -> Optional["Element"]:
        """Find first descendant element with matching tag name."""
        for node in self.iter():
            if node is not self and isinstance(node, Element) and node.tag == tag:
                return node
        return None

    def find_all(self, tag: str) -> List["Element"]:
        """Find all descendant elements with matching tag name."""
        return [
            node for node in self.iter()
            if node is not self and isinstance(node, Element) and node.tag == tag
        ]


Node = Union[Text, Element, Comment]


def node_kind(node: Node) -> NodeKind:
    """Return the variant of ``node``.

    Raises:
        TypeError: If ``node`` is not a document node
    """
    if isinstance(node, Text):
        return NodeKind.TEXT
    if isinstance(node, Element):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    raise TypeError(f"Not a document node: {type(node).__name__}")


def text(data: str) -> Text:
    """Create a text node."""
    return Text(data)


def comment(data: str) -> Comment:
    """Create a comment node."""
    return Comment(data)


def element(
    tag: str,
    attributes: Optional[Mapping[str, str]] = None,
    children: Iterable[Node] = (),
) -> Element:
    """Create an element node from a tag, attributes and children."""
    return Element(tag, attributes or {}, tuple(children))
