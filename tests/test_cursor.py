"""Tests for simparse.cursor: Cursor and ParseResult.

Validates the mutable cursor contract the engine relies on: read current,
advance in place, equality, and copy/restore snapshots.
"""

from __future__ import annotations

import pytest

from simparse import EndOfInput
from simparse.cursor import Cursor, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Cursor defaults to position 0."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_create_cursor_at_middle(self) -> None:
        """Create cursor at middle of source."""
        cursor = Cursor("hello", 2)

        assert cursor.current == "l"

    def test_negative_position_rejected(self) -> None:
        """Negative positions raise ValueError."""
        with pytest.raises(ValueError, match=">= 0"):
            Cursor("hello", -1)

    def test_cursor_is_mutable(self) -> None:
        """Cursor position can be reassigned (parsers advance in place)."""
        cursor = Cursor("hello")
        cursor.pos = 3

        assert cursor.current == "l"


# ============================================================================
# EOF DETECTION
# ============================================================================


class TestCursorEOF:
    """Test end-of-input detection."""

    def test_is_eof_true_at_end(self) -> None:
        """is_eof is True at end of source."""
        assert Cursor("hello", 5).is_eof

    def test_is_eof_true_beyond_end(self) -> None:
        """is_eof is True beyond end of source."""
        assert Cursor("hello", 10).is_eof

    def test_is_eof_true_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("").is_eof

    def test_current_raises_end_of_input(self) -> None:
        """current raises EndOfInput at end of source."""
        cursor = Cursor("hi", 2)

        with pytest.raises(EndOfInput) as exc_info:
            _ = cursor.current

        assert exc_info.value.position == 2

    def test_end_of_input_is_eoferror(self) -> None:
        """EndOfInput can be caught as the builtin EOFError."""
        with pytest.raises(EOFError):
            _ = Cursor("").current

    def test_nul_character_is_ordinary(self) -> None:
        """An embedded NUL is a character, not an end marker."""
        cursor = Cursor("a\x00b", 1)

        assert not cursor.is_eof
        assert cursor.current == "\x00"


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance() and peek()."""

    def test_advance_moves_in_place(self) -> None:
        """advance() mutates the cursor and returns None."""
        cursor = Cursor("hello")

        result = cursor.advance()

        assert result is None
        assert cursor.pos == 1
        assert cursor.current == "e"

    def test_advance_by_count(self) -> None:
        """advance(n) moves n characters."""
        cursor = Cursor("hello")
        cursor.advance(3)

        assert cursor.pos == 3

    def test_advance_clamps_at_end(self) -> None:
        """advance() never moves past end of source."""
        cursor = Cursor("hi")
        cursor.advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_peek_current_and_ahead(self) -> None:
        """peek() reads at an offset without moving."""
        cursor = Cursor("abc")

        assert cursor.peek() == "a"
        assert cursor.peek(2) == "c"
        assert cursor.pos == 0

    def test_peek_beyond_end_returns_none(self) -> None:
        """peek() returns None past end of source."""
        assert Cursor("abc").peek(3) is None

    def test_peek_negative_offset(self) -> None:
        """peek() can look behind but never before position 0."""
        cursor = Cursor("abc", 1)

        assert cursor.peek(-1) == "a"
        assert cursor.peek(-2) is None

    def test_slice_to(self) -> None:
        """slice_to() extracts text between two positions."""
        start = Cursor("hello world")
        end = start.copy()
        end.advance(5)

        assert start.slice_to(end.pos) == "hello"


# ============================================================================
# SNAPSHOTS AND EQUALITY
# ============================================================================


class TestCursorSnapshots:
    """Test copy(), restore() and equality."""

    def test_copy_is_independent(self) -> None:
        """Advancing a copy leaves the original untouched."""
        cursor = Cursor("hello")
        snapshot = cursor.copy()

        cursor.advance(2)

        assert snapshot.pos == 0
        assert cursor.pos == 2

    def test_restore_rewinds(self) -> None:
        """restore() returns the cursor to the snapshot position."""
        cursor = Cursor("hello")
        snapshot = cursor.copy()
        cursor.advance(4)

        cursor.restore(snapshot)

        assert cursor.pos == 0
        assert cursor == snapshot

    def test_restore_rejects_other_source(self) -> None:
        """Snapshots from a different text cannot be restored."""
        cursor = Cursor("hello")

        with pytest.raises(ValueError, match="different source"):
            cursor.restore(Cursor("world"))

    def test_equality_compares_source_and_position(self) -> None:
        """Cursors are equal iff source and position match."""
        assert Cursor("abc", 1) == Cursor("abc", 1)
        assert Cursor("abc", 1) != Cursor("abc", 2)
        assert Cursor("abc", 1) != Cursor("abd", 1)


# ============================================================================
# LINE:COLUMN
# ============================================================================


class TestCursorLineCol:
    """Test compute_line_col()."""

    def test_first_line(self) -> None:
        """Position 0 is 1:1."""
        assert Cursor("line1\nline2", 0).compute_line_col() == (1, 1)

    def test_second_line(self) -> None:
        """Columns restart after a newline."""
        assert Cursor("line1\nline2", 8).compute_line_col() == (2, 3)

    def test_crlf_source(self) -> None:
        """CRLF files count lines on the \\n."""
        assert Cursor("a\r\nb", 3).compute_line_col() == (2, 1)


# ============================================================================
# PARSE RESULT
# ============================================================================


class TestParseResult:
    """Test ParseResult value object."""

    def test_fields(self) -> None:
        """ParseResult carries value and cursor."""
        cursor = Cursor("abc", 2)
        result = ParseResult("ab", cursor)

        assert result.value == "ab"
        assert result.cursor is cursor

    def test_remaining(self) -> None:
        """remaining is the unconsumed tail."""
        assert ParseResult("ab", Cursor("abc", 2)).remaining == "c"
        assert ParseResult("abc", Cursor("abc", 3)).remaining == ""

    def test_frozen(self) -> None:
        """ParseResult is immutable."""
        result = ParseResult("a", Cursor("a", 1))

        with pytest.raises(AttributeError):
            result.value = "b"  # type: ignore[misc]
