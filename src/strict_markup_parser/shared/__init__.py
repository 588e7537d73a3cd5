"""Shared utilities for strict markup parsing.

This module provides configuration, error types, result objects and logging
helpers used across all processing layers.
"""

from .config import ConfigError, ConfigValidationError, ParserConfig
from .errors import (
    InputTooLargeError,
    MalformedMarkupError,
    MismatchedTagError,
    NestingDepthError,
    SourceLocation,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)
from .logging import CorrelationLogger, configure_logging, get_logger
from .result import ParseResult, PerformanceMetrics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ParserConfig",
    "InputTooLargeError",
    "MalformedMarkupError",
    "MismatchedTagError",
    "NestingDepthError",
    "SourceLocation",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "ParseResult",
    "PerformanceMetrics",
]
