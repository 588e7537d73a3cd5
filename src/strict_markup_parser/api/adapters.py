"""Adapters between document trees and other representations.

Provides conversion to and from plain dictionaries (and JSON), and export to
``lxml.etree`` for consumers that want XPath or serialization. lxml is
imported lazily so the core parser works without it.
"""

import json
from typing import Any, Dict, Optional

from strict_markup_parser.tree import (
    Comment,
    Element,
    Node,
    NodeKind,
    Text,
    node_kind,
)

LXML_INSTALL_HINT = "lxml is required for this conversion: pip install lxml"


def to_dict(node: Node) -> Dict[str, Any]:
    """Convert a node and its subtree to nested dictionaries.

    Examples:
        >>> to_dict(Text("hi"))
        {'type': 'text', 'data': 'hi'}
    """
    kind = node_kind(node)
    if kind is NodeKind.TEXT:
        return {"type": "text", "data": node.data}
    if kind is NodeKind.COMMENT:
        return {"type": "comment", "data": node.data}
    return {
        "type": "element",
        "tag": node.tag,
        "attributes": dict(node.attributes),
        "children": [to_dict(child) for child in node.children],
    }


def from_dict(data: Dict[str, Any]) -> Node:
    """Rebuild a node from the output of :func:`to_dict`.

    Raises:
        ValueError: If ``data`` does not describe a node
    """
    if not isinstance(data, dict):
        raise ValueError(f"Node data must be a mapping, got {type(data).__name__}")
    node_type = data.get("type")
    try:
        if node_type == "text":
            return Text(data["data"])
        if node_type == "comment":
            return Comment(data["data"])
        if node_type == "element":
            return Element(
                data["tag"],
                data.get("attributes", {}),
                tuple(from_dict(child) for child in data.get("children", [])),
            )
    except KeyError as e:
        raise ValueError(f"Missing field {e} in {node_type} node data") from e
    raise ValueError(f"Unknown node type: {node_type!r}")


def to_json(node: Node, indent: Optional[int] = 2) -> str:
    """Serialize a node tree as JSON via :func:`to_dict`."""
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


def is_lxml_available() -> bool:
    """Check if lxml is available."""
    try:
        import lxml.etree  # noqa: F401
        return True
    except ImportError:
        return False


def to_lxml(node: Node) -> Any:
    """Convert an element or comment tree to an ``lxml.etree`` element.

    Text children become ``.text`` of their parent or ``.tail`` of the
    preceding sibling, following the ElementTree model.

    Raises:
        ImportError: If lxml is not installed
        TypeError: If ``node`` is a bare text node
        ValueError: If lxml rejects a tag name or comment body
    """
    try:
        import lxml.etree as ET
    except ImportError as e:
        raise ImportError(LXML_INSTALL_HINT) from e

    kind = node_kind(node)
    if kind is NodeKind.TEXT:
        raise TypeError("A text node cannot be the root of an lxml tree")
    if kind is NodeKind.COMMENT:
        return ET.Comment(node.data)
    return _convert_element_to_lxml(node, ET)


def _convert_element_to_lxml(node: Element, ET: Any) -> Any:
    lxml_element = ET.Element(node.tag, dict(node.attributes))
    last_child = None

    for child in node.children:
        kind = node_kind(child)
        if kind is NodeKind.TEXT:
            if last_child is not None:
                last_child.tail = (last_child.tail or "") + child.data
            else:
                lxml_element.text = (lxml_element.text or "") + child.data
            continue

        if kind is NodeKind.COMMENT:
            converted = ET.Comment(child.data)
        else:
            converted = _convert_element_to_lxml(child, ET)
        lxml_element.append(converted)
        last_child = converted

    return lxml_element
