"""Public parsing API for strict markup documents.

Module-level functions cover the common cases; :class:`StrictMarkupParser`
holds a configuration for repeated use. Every function either returns a
complete tree or raises :class:`MalformedMarkupError`: there is no partial
result.
"""

from pathlib import Path
from typing import Optional, Union

from strict_markup_parser.grammar import MarkupParser
from strict_markup_parser.shared import (
    MalformedMarkupError,
    ParseResult,
    ParserConfig,
    get_logger,
)
from strict_markup_parser.tree import Node

# Max length for content preview in logs
PREVIEW_LENGTH = 100

PathType = Union[str, Path]


def _preview(document_text: str) -> str:
    if len(document_text) > PREVIEW_LENGTH:
        return document_text[:PREVIEW_LENGTH] + "..."
    return document_text


def _run(
    document_text: str,
    config: Optional[ParserConfig],
    correlation_id: Optional[str],
    operation: str,
) -> ParseResult:
    parser = MarkupParser(document_text, config, correlation_id)
    logger = get_logger(__name__, parser.correlation_id, operation)
    logger.info(
        "Starting markup parse operation",
        extra={
            "content_length": len(document_text),
            "preview": _preview(document_text),
        },
    )
    try:
        return parser.parse_document()
    except MalformedMarkupError as e:
        logger.warning(
            "Malformed markup",
            extra={
                "reason": e.reason,
                "location": str(e.location) if e.location else None,
            },
        )
        raise


def parse(
    document_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Parse markup text into a single root node.

    Args:
        document_text: Complete markup document
        config: Optional parser configuration
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The only top-level node, or a synthesized root element wrapping
        zero or several top-level nodes

    Raises:
        MalformedMarkupError: If the document is not well formed
        TypeError: If ``document_text`` is not a string

    Examples:
        >>> root = parse('<a x="1">hello<b></b></a>')
        >>> root.tag, root.get_attribute('x')
        ('a', '1')
        >>> parse('<a></a><b></b>').tag
        'html'
    """
    return _run(document_text, config, correlation_id, "parse").root


def parse_string(
    document_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Parse markup from a string; same as :func:`parse`."""
    return _run(document_text, config, correlation_id, "parse_string").root


def parse_document(
    document_text: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> ParseResult:
    """Parse markup and return the root together with parse metrics."""
    return _run(document_text, config, correlation_id, "parse_document")


def parse_file(
    file_path: PathType,
    encoding: str = "utf-8",
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> Node:
    """Read a markup file and parse it.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in ``encoding``
        MalformedMarkupError: If the content is not well formed
    """
    path = Path(file_path)
    logger = get_logger(__name__, correlation_id, "parse_file")
    logger.debug("Reading markup file", extra={"file_path": str(path)})
    document_text = path.read_text(encoding=encoding)
    return _run(document_text, config, correlation_id, "parse_file").root


class StrictMarkupParser:
    """Configured parser for repeated use.

    Examples:
        >>> parser = StrictMarkupParser(ParserConfig(root_tag="document"))
        >>> parser.parse('').tag
        'document'
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, document_text: str, correlation_id: Optional[str] = None) -> Node:
        """Parse markup text with this parser's configuration."""
        return parse(document_text, self.config, correlation_id)

    def parse_document(
        self, document_text: str, correlation_id: Optional[str] = None
    ) -> ParseResult:
        """Parse markup text and return the root with metrics."""
        return parse_document(document_text, self.config, correlation_id)

    def parse_file(
        self,
        file_path: PathType,
        encoding: str = "utf-8",
        correlation_id: Optional[str] = None,
    ) -> Node:
        """Read and parse a markup file with this parser's configuration."""
        return parse_file(file_path, encoding, self.config, correlation_id)
