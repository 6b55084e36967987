"""simparse exception hierarchy with structured diagnostics.

Two branches hang off SimparseError:

- ParseError: input did not match. Combinators (|, many, back, peek)
  intercept only this branch.
- GrammarError: the grammar itself is broken (undefined forward
  declaration, runaway recursion). Never intercepted by combinators.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConditionUnsatisfied",
    "EndOfInput",
    "GrammarError",
    "ParseError",
    "SimparseError",
    "UndefinedParserError",
]


class SimparseError(Exception):
    """Base exception for all simparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SimparseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(SimparseError):
    """Parser failed at the current cursor position.

    Carries no guarantee about where the cursor was left: compound
    parsers may have consumed input before failing. Use back() when
    the cursor must be restored.
    """

    @property
    def position(self) -> int | None:
        """Character offset of the failure, if known."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.position

    def format_with_context(self, source: str, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            source: The text that was being parsed
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> from simparse.diagnostics import ErrorTemplate
            >>> error = EndOfInput(ErrorTemplate.end_of_input(9))
            >>> print(error.format_with_context("a = 1\\nb ="))
            2:4: Unexpected end of input at position 9
            <BLANKLINE>
               1 | a = 1
               2 | b =
                 |    ^
        """
        from simparse.cursor import Cursor  # noqa: PLC0415 - circular

        position = self.position if self.position is not None else 0
        line, col = Cursor(source, position).compute_line_col()
        lines = source.split("\n")

        result_lines = [f"{line}:{col}: {self}", ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            # Add pointer on error line
            if i == line:
                result_lines.append("     | " + " " * (col - 1) + "^")

        return "\n".join(result_lines)


class EndOfInput(ParseError, EOFError):
    """A character was required but the cursor was at end of input.

    Also an EOFError, so code written against plain EOF handling
    catches it without importing simparse.
    """


class ConditionUnsatisfied(ParseError):
    """A character was present but did not meet the parser's condition."""


class GrammarError(SimparseError):
    """The grammar is malformed.

    Raised for definition mistakes rather than for non-matching input,
    so |, many, back and peek let it propagate.
    """


class UndefinedParserError(GrammarError):
    """A forward declaration was invoked before define() bound it."""
