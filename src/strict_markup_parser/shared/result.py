"""Result objects for strict markup parsing.

``parse`` returns a bare node; ``parse_document`` wraps the same node in a
:class:`ParseResult` together with timing and tree statistics.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from strict_markup_parser.tree.nodes import Node


@dataclass
class PerformanceMetrics:
    """Performance and shape metrics for a single parse call."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    element_count: int = 0
    text_count: int = 0
    comment_count: int = 0
    max_depth: int = 0

    @property
    def node_count(self) -> int:
        """Total number of nodes in the tree."""
        return self.element_count + self.text_count + self.comment_count

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms


@dataclass
class ParseResult:
    """Parsed document root plus metadata.

    Attributes:
        root: Root node of the document
        metrics: Timing and tree statistics
        correlation_id: Correlation ID the parse was logged under
        wrapped: True if the root element was synthesized because the
            document did not have exactly one top-level node
    """

    root: "Node"
    metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None
    wrapped: bool = False

    @property
    def node_count(self) -> int:
        return self.metrics.node_count

    def summary(self) -> Dict[str, Any]:
        """Return a JSON-ready summary of the result."""
        return {
            "root_kind": type(self.root).__name__.lower(),
            "wrapped": self.wrapped,
            "element_count": self.metrics.element_count,
            "text_count": self.metrics.text_count,
            "comment_count": self.metrics.comment_count,
            "max_depth": self.metrics.max_depth,
            "characters_processed": self.metrics.characters_processed,
            "processing_time_ms": round(self.metrics.processing_time_ms, 3),
        }
