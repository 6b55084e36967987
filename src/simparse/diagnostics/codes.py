"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for parse failures and
grammar definition errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse failures (raised as ParseError, recoverable by combinators)
        2000-2999: Grammar errors (raised as GrammarError, never intercepted)
    """

    # Parse failures (1000-1999)
    END_OF_INPUT = 1001
    CONDITION_UNSATISFIED = 1002
    STRING_MISMATCH = 1003

    # Grammar errors (2000-2999)
    UNDEFINED_FORWARD = 2001
    MAX_DEPTH_EXCEEDED = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Positions are character offsets into the parsed source (0-indexed).
    Line and column are not stored: they cost O(n) to compute and are
    only derived on demand when formatting with the source text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Character offset where the failure occurred (None if not applicable)
        expected: What the failing parser was looking for (None if not applicable)
        found: The character actually present (None at end of input)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    expected: str | None = None
    found: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust compiler) style.

        Example output:
            error[STRING_MISMATCH]: Expected 'b' while matching 'abc', found 'x'
              --> position 1
              = expected: 'b'
              = found: 'x'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
