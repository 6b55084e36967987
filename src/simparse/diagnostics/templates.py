"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure case in one place.
    """

    # =========================================================================
    # PARSE FAILURES (1000-1999)
    # =========================================================================

    @staticmethod
    def end_of_input(position: int) -> Diagnostic:
        """A character was required but the cursor is at end of input.

        Args:
            position: The position where end of input was encountered

        Returns:
            Diagnostic for END_OF_INPUT
        """
        msg = f"Unexpected end of input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.END_OF_INPUT,
            message=msg,
            position=position,
        )

    @staticmethod
    def condition_unsatisfied(found: str, position: int) -> Diagnostic:
        """A character was present but rejected by a predicate.

        Args:
            found: The rejected character
            position: The position of the rejected character

        Returns:
            Diagnostic for CONDITION_UNSATISFIED
        """
        msg = f"Condition not satisfied by {found!r} at position {position}"
        return Diagnostic(
            code=DiagnosticCode.CONDITION_UNSATISFIED,
            message=msg,
            position=position,
            found=found,
        )

    @staticmethod
    def string_mismatch(
        literal: str, expected: str, found: str, position: int
    ) -> Diagnostic:
        """A literal string diverged from the input.

        Args:
            literal: The full literal being matched
            expected: The character of the literal that did not match
            found: The character present in the input
            position: The position of the mismatch

        Returns:
            Diagnostic for STRING_MISMATCH
        """
        msg = f"Expected {expected!r} while matching {literal!r}, found {found!r}"
        return Diagnostic(
            code=DiagnosticCode.STRING_MISMATCH,
            message=msg,
            position=position,
            expected=expected,
            found=found,
            hint="string() keeps the matched prefix consumed; wrap it in back() to restore",
        )

    # =========================================================================
    # GRAMMAR ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def undefined_forward(name: str) -> Diagnostic:
        """A forward declaration was invoked before define() was called.

        Args:
            name: Name of the forward-declared parser

        Returns:
            Diagnostic for UNDEFINED_FORWARD
        """
        msg = f"Forward-declared parser {name} was invoked before being defined"
        return Diagnostic(
            code=DiagnosticCode.UNDEFINED_FORWARD,
            message=msg,
            hint="Call define(parser) on the forward declaration before parsing",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Recursion through forward-declared parsers exceeded the limit.

        Args:
            max_depth: The configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum parser nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check the grammar for left recursion or raise max_depth",
        )

    @staticmethod
    def recursion_limit_exceeded(name: str, max_depth: int) -> Diagnostic:
        """The interpreter ran out of stack before the depth guard fired.

        Happens when each nesting level spans more frames than estimated,
        or when several forward declarations recurse into each other.

        Args:
            name: Name of the outermost forward-declared parser
            max_depth: Its configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = (
            f"Python recursion limit reached inside {name} "
            f"before its nesting depth limit ({max_depth})"
        )
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Lower max_depth or raise sys.setrecursionlimit()",
        )
