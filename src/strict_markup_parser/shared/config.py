"""Configuration for strict markup parsing.

This module provides the immutable configuration object that controls the
parser: the tag used for the synthesized document root, resource limits, and
logging behavior.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DEFAULT_ROOT_TAG = "html"
DEFAULT_MAX_DEPTH = 200
STRICT_MAX_DEPTH = 64
STRICT_MAX_INPUT_SIZE = 1024 * 1024  # 1Mi code points

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


def _is_valid_name(name: str) -> bool:
    return bool(name) and all(c.isascii() and c.isalnum() for c in name)


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the markup parser.

    Frozen so that a single instance can be shared between parser instances
    and threads.

    Attributes:
        root_tag: Tag name of the wrapper element synthesized when a document
            does not consist of exactly one top-level node
        max_depth: Maximum element nesting depth, or None for no limit
        max_input_size: Maximum document length in characters, or None
        log_level: Logging level name used by the command-line tool
        correlation_id: Optional correlation ID attached to log records
    """

    root_tag: str = DEFAULT_ROOT_TAG
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH
    max_input_size: Optional[int] = None
    log_level: str = "WARNING"
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.root_tag, str) or not _is_valid_name(self.root_tag):
            raise ConfigValidationError(
                f"root_tag must be a non-empty ASCII alphanumeric name, "
                f"got {self.root_tag!r}",
                field_name="root_tag",
            )
        for name in ("max_depth", "max_input_size"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                raise ConfigValidationError(
                    f"{name} must be an integer or None, got {type(value).__name__}",
                    field_name=name,
                )
        if self.max_depth is not None and self.max_depth <= 0:
            raise ConfigValidationError(
                "max_depth must be > 0 or None",
                field_name="max_depth",
                suggestions=["Use None to disable the nesting limit"],
            )
        if self.max_input_size is not None and self.max_input_size <= 0:
            raise ConfigValidationError(
                "max_input_size must be > 0 or None",
                field_name="max_input_size",
            )
        if not isinstance(self.log_level, str) or self.log_level not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"log_level must be one of {VALID_LOG_LEVELS}",
                field_name="log_level",
            )

    @classmethod
    def default(cls) -> "ParserConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "ParserConfig":
        """Create configuration with tight limits for untrusted input."""
        return cls(max_depth=STRICT_MAX_DEPTH, max_input_size=STRICT_MAX_INPUT_SIZE)

    @classmethod
    def permissive(cls) -> "ParserConfig":
        """Create configuration without depth or size limits."""
        return cls(max_depth=None, max_input_size=None)

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig().override(root_tag="document")
            >>> config.root_tag
            'document'
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos in configuration files do not
        pass silently.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a mapping")
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ParserConfig":
        """Load configuration from a JSON file."""
        config_path = Path(path)
        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        return cls.from_json(content)
