"""Forward-only character cursor over a markup document.

The cursor is the only place where the read position changes. Python strings
index by code point, so a multi-byte character always advances as one unit.
"""

from typing import Callable

from strict_markup_parser.shared.errors import (
    SourceLocation,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)

CharPredicate = Callable[[str], bool]


def is_whitespace(char: str) -> bool:
    """Return True for any Unicode whitespace character."""
    return char.isspace()


def is_name_char(char: str) -> bool:
    """Return True for characters allowed in tag and attribute names."""
    return char.isascii() and char.isalnum()


class CharacterCursor:
    """Stateful cursor over the full input text.

    Tracks the code point offset along with 1-based line and column numbers
    for diagnostics.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position}, "
            f"length={len(self.text)})"
        )

    @property
    def location(self) -> SourceLocation:
        """Current position as a :class:`SourceLocation`."""
        return SourceLocation(self.line, self.column, self.position)

    @property
    def remaining(self) -> int:
        """Number of characters not yet consumed."""
        return max(0, len(self.text) - self.position)

    def at_end(self) -> bool:
        """Return True once every character has been consumed."""
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.at_end():
            raise UnexpectedEndOfInputError("a character", self.location)
        return self.text[self.position]

    def starts_with(self, literal: str) -> bool:
        """Check whether the unconsumed input begins with ``literal``."""
        return self.text.startswith(literal, self.position)

    def advance(self) -> str:
        """Consume and return the current character."""
        char = self.peek()
        self.position += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def consume_while(self, predicate: CharPredicate) -> str:
        """Consume characters while ``predicate`` holds; may return ''."""
        start = self.position
        while not self.at_end() and predicate(self.text[self.position]):
            self.advance()
        return self.text[start:self.position]

    def consume_until_literal(self, literal: str) -> str:
        """Consume characters up to, but not including, ``literal``.

        Raises:
            UnexpectedEndOfInputError: If input ends before ``literal`` appears
        """
        start = self.position
        while not self.starts_with(literal):
            if self.at_end():
                raise UnexpectedEndOfInputError(repr(literal), self.location)
            self.advance()
        return self.text[start:self.position]

    def skip_whitespace(self) -> None:
        """Discard any whitespace at the cursor."""
        self.consume_while(is_whitespace)

    def expect(self, literal: str) -> None:
        """Consume ``literal`` one character at a time.

        Raises:
            UnexpectedCharacterError: If a character does not match
            UnexpectedEndOfInputError: If input ends inside ``literal``
        """
        for expected in literal:
            if self.at_end():
                raise UnexpectedEndOfInputError(repr(expected), self.location)
            found = self.text[self.position]
            if found != expected:
                raise UnexpectedCharacterError(expected, found, self.location)
            self.advance()
