"""Tests for the forward-only character cursor."""

import pytest

from strict_markup_parser.character import CharacterCursor, is_name_char, is_whitespace
from strict_markup_parser.shared import (
    SourceLocation,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
)


class TestCursorPrimitives:
    """Test peek, advance and end-of-input handling."""

    def test_peek_does_not_consume(self) -> None:
        """Test peek returns the current character without moving."""
        cursor = CharacterCursor("ab")

        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.position == 0

    def test_advance_returns_character_and_moves(self) -> None:
        """Test advance consumes exactly one character."""
        cursor = CharacterCursor("ab")

        assert cursor.advance() == "a"
        assert cursor.position == 1
        assert cursor.advance() == "b"
        assert cursor.at_end()

    def test_peek_at_end_raises(self) -> None:
        """Test peek past the end is a malformed-markup failure."""
        cursor = CharacterCursor("")

        with pytest.raises(UnexpectedEndOfInputError):
            cursor.peek()

    def test_advance_at_end_raises(self) -> None:
        """Test advance past the end is a malformed-markup failure."""
        cursor = CharacterCursor("x")
        cursor.advance()

        with pytest.raises(UnexpectedEndOfInputError):
            cursor.advance()

    def test_multibyte_characters_advance_as_one_unit(self) -> None:
        """Test non-ASCII characters are consumed one code point at a time."""
        cursor = CharacterCursor("é日🙂")

        assert cursor.advance() == "é"
        assert cursor.advance() == "日"
        assert cursor.advance() == "🙂"
        assert cursor.at_end()
        assert cursor.position == 3

    def test_starts_with_near_end_does_not_fail(self) -> None:
        """Test a literal longer than the remaining input simply does not match."""
        cursor = CharacterCursor("--")

        assert cursor.starts_with("--")
        assert not cursor.starts_with("-->")

    def test_line_and_column_tracking(self) -> None:
        """Test newlines advance the line and reset the column."""
        cursor = CharacterCursor("ab\ncd")
        for _ in range(4):
            cursor.advance()

        assert cursor.location == SourceLocation(line=2, column=2, offset=4)


class TestConsumeHelpers:
    """Test the consume_* helpers built on advance."""

    def test_consume_while_returns_matched_prefix(self) -> None:
        """Test consume_while stops at the first non-matching character."""
        cursor = CharacterCursor("abc123-rest")

        assert cursor.consume_while(is_name_char) == "abc123"
        assert cursor.peek() == "-"

    def test_consume_while_may_return_empty(self) -> None:
        """Test consume_while returns an empty string when nothing matches."""
        cursor = CharacterCursor("<tag>")

        assert cursor.consume_while(is_name_char) == ""
        assert cursor.position == 0

    def test_consume_while_stops_at_end(self) -> None:
        """Test consume_while consumes the whole input without failing."""
        cursor = CharacterCursor("abc")

        assert cursor.consume_while(lambda c: True) == "abc"
        assert cursor.at_end()

    def test_consume_until_literal_leaves_literal(self) -> None:
        """Test consume_until_literal does not consume the terminator."""
        cursor = CharacterCursor("body text-->after")

        assert cursor.consume_until_literal("-->") == "body text"
        assert cursor.starts_with("-->")

    def test_consume_until_literal_missing_raises(self) -> None:
        """Test reaching the end before the literal is a failure."""
        cursor = CharacterCursor("never closed --")

        with pytest.raises(UnexpectedEndOfInputError, match="'-->'"):
            cursor.consume_until_literal("-->")

    def test_skip_whitespace(self) -> None:
        """Test skip_whitespace discards spaces, tabs and newlines."""
        cursor = CharacterCursor(" \t\n x")

        cursor.skip_whitespace()

        assert cursor.peek() == "x"


class TestExpect:
    """Test literal matching with fail-fast errors."""

    def test_expect_consumes_literal(self) -> None:
        """Test expect consumes every character of the literal."""
        cursor = CharacterCursor("<!--x")

        cursor.expect("<!--")

        assert cursor.peek() == "x"

    def test_expect_mismatch_reports_expected_and_found(self) -> None:
        """Test a mismatch raises with both characters and the location."""
        cursor = CharacterCursor("<!-x")

        with pytest.raises(UnexpectedCharacterError) as exc_info:
            cursor.expect("<!--")

        error = exc_info.value
        assert error.expected == "-"
        assert error.found == "x"
        assert error.location == SourceLocation(line=1, column=4, offset=3)
        assert "line 1, column 4" in str(error)

    def test_expect_at_end_raises(self) -> None:
        """Test input ending inside a literal raises end-of-input."""
        cursor = CharacterCursor("-")

        with pytest.raises(UnexpectedEndOfInputError):
            cursor.expect("->")


def test_character_predicates() -> None:
    """Test name and whitespace predicates."""
    assert is_name_char("a")
    assert is_name_char("Z")
    assert is_name_char("7")
    assert not is_name_char("-")
    assert not is_name_char(":")
    assert not is_name_char("é")
    assert is_whitespace(" ")
    assert not is_whitespace("x")
