"""Recursive-descent markup parser.

Each grammar rule is a method that reads through a single
:class:`~strict_markup_parser.character.CharacterCursor` and returns a fully
constructed node. The grammar is single-pass and forward-only: once
:meth:`MarkupParser.parse_node` has picked a rule there is no backtracking,
and any violation raises a :class:`MalformedMarkupError` that unwinds the
whole parse.
"""

import time
from typing import Dict, List, Optional, Tuple

from strict_markup_parser.character import CharacterCursor, is_name_char
from strict_markup_parser.shared import (
    InputTooLargeError,
    MismatchedTagError,
    NestingDepthError,
    ParseResult,
    ParserConfig,
    PerformanceMetrics,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    get_logger,
)
from strict_markup_parser.tree import Comment, Element, Node, Text

TAG_OPEN = "<"
TAG_CLOSE = ">"
CLOSING_TAG_OPEN = "</"
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
ATTRIBUTE_ASSIGN = "="
QUOTES: Tuple[str, ...] = ('"', "'")

MS_PER_SECOND = 1000


class MarkupParser:
    """Single-use parser for one markup document.

    The parser owns its cursor for the duration of one :meth:`parse` call;
    a second call raises ``RuntimeError``. Construct a new parser per
    document.
    """

    def __init__(
        self,
        text: str,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        if not isinstance(text, str):
            raise TypeError(
                f"Markup input must be a str, got {type(text).__name__}"
            )
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.cursor = CharacterCursor(text)
        self.logger = get_logger(__name__, self.correlation_id, "markup_parser")

        self.depth = 0
        self.wrapped = False
        self.metrics = PerformanceMetrics(characters_processed=len(text))
        self._used = False

    # Entry points

    def parse(self) -> Node:
        """Parse the whole document and return its single root node.

        Exactly one top-level node is returned as-is. Zero or several
        top-level nodes are wrapped in an element named
        ``config.root_tag`` with no attributes.
        """
        if self._used:
            raise RuntimeError("MarkupParser instances can only parse once")
        self._used = True

        max_size = self.config.max_input_size
        if max_size is not None and len(self.cursor.text) > max_size:
            raise InputTooLargeError(len(self.cursor.text), max_size)

        start_time = time.time()
        self.logger.debug(
            "Starting markup parse",
            extra={"content_length": len(self.cursor.text)},
        )

        try:
            nodes = self.parse_nodes()
        except RecursionError as e:
            # Reached only when max_depth is unset or above what the
            # interpreter stack allows.
            raise NestingDepthError(self.depth, self.cursor.location) from e
        if len(nodes) == 1:
            root = nodes[0]
        else:
            root = self._make_element(self.config.root_tag, {}, nodes)
            self.wrapped = True

        self.metrics.processing_time_ms = (time.time() - start_time) * MS_PER_SECOND
        self.logger.debug(
            "Markup parse complete",
            extra={
                "node_count": self.metrics.node_count,
                "wrapped": self.wrapped,
                "processing_time_ms": self.metrics.processing_time_ms,
            },
        )
        return root

    def parse_document(self) -> ParseResult:
        """Parse the document and return the root with metrics."""
        root = self.parse()
        return ParseResult(
            root=root,
            metrics=self.metrics,
            correlation_id=self.correlation_id,
            wrapped=self.wrapped,
        )

    # Grammar rules

    def parse_nodes(self) -> List[Node]:
        """Parse siblings until end of input or a closing tag."""
        nodes: List[Node] = []
        while True:
            self.cursor.skip_whitespace()
            if self.cursor.at_end() or self.cursor.starts_with(CLOSING_TAG_OPEN):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        """Dispatch to the comment, element or text rule."""
        if self.cursor.starts_with(COMMENT_OPEN):
            return self.parse_comment()
        if self.cursor.peek() == TAG_OPEN:
            return self.parse_element()
        return self.parse_text()

    def parse_comment(self) -> Comment:
        """Parse ``<!--`` body ``-->``; the first ``-->`` ends the comment."""
        self.cursor.expect(COMMENT_OPEN)
        body = self.cursor.consume_until_literal(COMMENT_CLOSE)
        self.cursor.expect(COMMENT_CLOSE)
        self.metrics.comment_count += 1
        return Comment(body)

    def parse_text(self) -> Text:
        self.metrics.text_count += 1
        return Text(self.cursor.consume_while(lambda c: c != TAG_OPEN))

    def parse_name(self) -> str:
        """Parse a tag or attribute name (ASCII letters and digits only)."""
        return self.cursor.consume_while(is_name_char)

    def parse_element(self) -> Element:
        """Parse an opening tag, its children and the matching closing tag."""
        start = self.cursor.location
        self.depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth > max_depth:
            raise NestingDepthError(max_depth, start)
        self.metrics.max_depth = max(self.metrics.max_depth, self.depth)

        self.cursor.expect(TAG_OPEN)
        tag_name = self.parse_name()
        attributes = self.parse_attributes()
        self.cursor.expect(TAG_CLOSE)

        children = self.parse_nodes()

        self.cursor.expect(CLOSING_TAG_OPEN)
        closing_location = self.cursor.location
        closing_name = self.parse_name()
        if closing_name != tag_name:
            raise MismatchedTagError(tag_name, closing_name, closing_location)
        self.cursor.expect(TAG_CLOSE)

        self.depth -= 1
        return self._make_element(tag_name, attributes, children)

    def parse_attributes(self) -> Dict[str, str]:
        """Parse ``name="value"`` pairs up to the end of the opening tag.

        A repeated name keeps the last value.
        """
        attributes: Dict[str, str] = {}
        while True:
            self.cursor.skip_whitespace()
            if self.cursor.at_end():
                raise UnexpectedEndOfInputError(repr(TAG_CLOSE), self.cursor.location)
            if self.cursor.peek() == TAG_CLOSE:
                break
            name, value = self.parse_attribute()
            attributes[name] = value
        return attributes

    def parse_attribute(self) -> Tuple[str, str]:
        name = self.parse_name()
        self.cursor.expect(ATTRIBUTE_ASSIGN)
        value = self.parse_attribute_value()
        return name, value

    def parse_attribute_value(self) -> str:
        """Parse a single- or double-quoted value; no escapes are recognized."""
        if self.cursor.at_end():
            raise UnexpectedEndOfInputError("a quote", self.cursor.location)
        quote = self.cursor.peek()
        if quote not in QUOTES:
            raise UnexpectedCharacterError(QUOTES, quote, self.cursor.location)
        self.cursor.advance()
        value = self.cursor.consume_while(lambda c: c != quote)
        self.cursor.expect(quote)
        return value

    def _make_element(
        self, tag: str, attributes: Dict[str, str], children: List[Node]
    ) -> Element:
        self.metrics.element_count += 1
        return Element(tag, attributes, tuple(children))
