"""Error types for strict markup parsing.

Every grammar violation is reported through a single exception family rooted
at :class:`MalformedMarkupError`. Errors are raised at the point of violation
and propagate unchanged to the caller; no partial tree is ever returned.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class SourceLocation:
    """Position of the cursor inside the source document."""

    line: int
    column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate position values."""
        if self.line < 1:
            raise ValueError("Line number must be >= 1")
        if self.column < 1:
            raise ValueError("Column number must be >= 1")
        if self.offset < 0:
            raise ValueError("Offset must be >= 0")

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


def _describe(value: Union[None, str, Tuple[str, ...]]) -> str:
    if value is None:
        return "end of input"
    if isinstance(value, tuple):
        return " or ".join(repr(v) for v in value)
    return repr(value)


class MalformedMarkupError(ValueError):
    """Raised when the input is not well-formed markup."""

    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        self.reason = message
        self.location = location
        if location is not None:
            message = f"{message} at {location}"
        super().__init__(message)


class UnexpectedCharacterError(MalformedMarkupError):
    """A required literal was not present at the cursor position."""

    def __init__(
        self,
        expected: Union[str, Tuple[str, ...]],
        found: str,
        location: Optional[SourceLocation] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected {_describe(expected)} but found {_describe(found)}",
            location,
        )


class UnexpectedEndOfInputError(MalformedMarkupError):
    """Input ended while a token was still required."""

    def __init__(self, expected: str, location: Optional[SourceLocation] = None):
        self.expected = expected
        super().__init__(f"Unexpected end of input, expected {expected}", location)


class MismatchedTagError(MalformedMarkupError):
    """A closing tag name does not match its opening tag."""

    def __init__(
        self,
        opening_tag: str,
        closing_tag: str,
        location: Optional[SourceLocation] = None,
    ):
        self.opening_tag = opening_tag
        self.closing_tag = closing_tag
        super().__init__(
            f"Closing tag </{closing_tag}> does not match opening tag <{opening_tag}>",
            location,
        )


class NestingDepthError(MalformedMarkupError):
    """Element nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, location: Optional[SourceLocation] = None):
        self.max_depth = max_depth
        super().__init__(
            f"Element nesting exceeds maximum depth of {max_depth}", location
        )


class InputTooLargeError(MalformedMarkupError):
    """Document is larger than the configured input size limit."""

    def __init__(self, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Input of {size} characters exceeds limit of {max_size} characters"
        )
