"""Mutable cursor over in-memory text.

A Cursor is the single piece of state threaded through every parser
invocation. Parsers receive it by reference and advance it in place;
the only observable effect of a parser is how far the cursor moved.

Design:
    - Cursor is mutable (slots dataclass), shared by the whole parse
    - The cursor never owns the text: it holds a reference to a str
    - End of input is a state (is_eof), not a sentinel character
    - Snapshots are plain copies; restore() rewinds to one
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    \\n is the line delimiter for compute_line_col(). CRLF sources work
    because the \\n is still present; CR-only sources report line 1.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from simparse.diagnostics import EndOfInput, ErrorTemplate

__all__ = ["Cursor", "ParseResult"]

T = TypeVar("T")


@dataclass(slots=True)
class Cursor:
    """Mutable source position tracker.

    Equality compares both the source and the position, so two cursors
    are equal only when they point at the same offset of the same text.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> snapshot = cursor.copy()
        >>> cursor.advance()
        >>> cursor.current
        'e'
        >>> cursor.restore(snapshot)
        >>> cursor.pos
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    def __post_init__(self) -> None:
        """Reject negative positions.

        Raises:
            ValueError: If pos is negative
        """
        if self.pos < 0:
            msg = f"Cursor position must be >= 0, got {self.pos}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when no characters remain (pos >= len(source))."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character without consuming it.

        Returns:
            Current character at position

        Raises:
            EndOfInput: If at end of input
        """
        if self.is_eof:
            raise EndOfInput(ErrorTemplate.end_of_input(self.pos))
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond end of input
        """
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> None:
        """Move forward by count positions, clamped to end of input.

        Args:
            count: Number of positions to advance (default: 1)
        """
        self.pos = min(self.pos + count, len(self.source))

    def copy(self) -> "Cursor":
        """Return an independent cursor at the same position."""
        return Cursor(self.source, self.pos)

    def restore(self, snapshot: "Cursor") -> None:
        """Rewind (or fast-forward) to a snapshot taken with copy().

        Args:
            snapshot: A cursor over the same source

        Raises:
            ValueError: If the snapshot belongs to a different source
        """
        if snapshot.source is not self.source and snapshot.source != self.source:
            msg = "Cannot restore a snapshot taken over a different source"
            raise ValueError(msg)
        self.pos = snapshot.pos

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Example:
            >>> cursor = Cursor("hello world")
            >>> start = cursor.copy()
            >>> cursor.advance(5)
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1

        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1

        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Top-level parse outcome: the parsed value and the final cursor.

    Returned by Parser.parse(). Inside a grammar, parsers return the bare
    value and communicate position through the shared cursor instead.

    Example:
        >>> result = ParseResult("ab", Cursor("abc", 2))
        >>> result.value
        'ab'
        >>> result.remaining
        'c'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """Unconsumed tail of the source."""
        return self.cursor.slice_to(len(self.cursor.source))
