"""Structured logging utilities for strict markup parsing.

This module provides correlation-aware logging so that every record emitted
while parsing a document can be traced back to the originating request.
"""

import logging
from typing import Any, MutableMapping, Optional, Tuple, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(component)s] %(message)s"


class _ComponentDefaultsFilter(logging.Filter):
    """Fill in correlation fields for records that did not set them."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "component"):
            record.component = record.name.split(".")[-1]
        if not hasattr(record, "correlation_id"):
            record.correlation_id = None
        return True


class CorrelationLogger(logging.LoggerAdapter):
    """Adapter that stamps ``component`` and ``correlation_id`` on each record.

    Per-call ``extra`` values are merged over the adapter's own fields
    instead of replacing them.
    """

    def __init__(self, logger: logging.Logger, component: str,
                 correlation_id: Optional[str] = None) -> None:
        super().__init__(logger, {"component": component,
                                  "correlation_id": correlation_id})

    @property
    def component(self) -> str:
        return self.extra["component"]

    @property
    def correlation_id(self) -> Optional[str]:
        return self.extra["correlation_id"]

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Get a correlation-aware logger.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name; defaults to the last dotted part of ``name``
    """
    return CorrelationLogger(
        logging.getLogger(name), component or name.split(".")[-1], correlation_id
    )


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the package logger with a stderr handler.

    Calling this more than once only updates the level.
    """
    package_logger = logging.getLogger("strict_markup_parser")
    package_logger.setLevel(level)
    if not any(getattr(h, "_strict_markup", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(_ComponentDefaultsFilter())
        handler._strict_markup = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
