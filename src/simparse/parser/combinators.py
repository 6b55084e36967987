"""Repetition, suppression, backtracking and lookahead combinators.

Cursor restoration rules:
    back()  restores the cursor when the wrapped parser fails
    peek()  restores the cursor on every exit path
    others  never restore; compound parsers may fail after consuming input

Only ParseError is intercepted. GrammarError subclasses (undefined
forward declarations, depth limit) always propagate.

Python 3.13+. Zero external dependencies.
"""

from simparse.constants import MAX_DEPTH
from simparse.core import DepthGuard, DepthLimitExceededError
from simparse.cursor import Cursor
from simparse.diagnostics import ErrorTemplate, ParseError, UndefinedParserError
from simparse.parser.core import Parser, ParserLike, as_parser

__all__ = ["Forward", "back", "forward", "ignore", "many", "peek", "rep"]


def rep(n: int, parser: ParserLike) -> Parser:
    """Run parser exactly n times, concatenating the results.

    Fails on the first failing repetition without undoing the earlier
    ones. ``rep(0, p)`` succeeds with ``""`` and never calls p.

    Raises:
        ValueError: If n is negative

    Example:
        >>> cursor = Cursor("abc")
        >>> from simparse import any_char
        >>> rep(2, any_char)(cursor), cursor.pos
        ('ab', 2)
    """
    if n < 0:
        msg = f"rep() count must be >= 0, got {n}"
        raise ValueError(msg)
    p = as_parser(parser)

    def repeat_exactly(cursor: Cursor) -> str:
        return "".join([p(cursor) for _ in range(n)])

    return Parser(repeat_exactly, f"rep({n}, {p.name})")


def many(parser: ParserLike) -> Parser:
    """Run parser until it fails, concatenating the successes.

    Never fails: zero matches yields ``""``. The final, failing
    invocation is not undone, so parser should be atomic (a primitive,
    or wrapped in back()) to leave the cursor at the end of the last
    match. A parser that succeeds without consuming input loops forever.

    Example:
        >>> cursor = Cursor("123abc")
        >>> from simparse import digit
        >>> many(digit)(cursor), cursor.pos
        ('123', 3)
    """
    p = as_parser(parser)

    def repeat(cursor: Cursor) -> str:
        chunks: list[str] = []
        while True:
            try:
                chunks.append(p(cursor))
            except ParseError:
                break
        return "".join(chunks)

    return Parser(repeat, f"many({p.name})")


def ignore(parser: ParserLike) -> Parser:
    """Run parser for its effect on the cursor and discard the value.

    Failures propagate unchanged; on success the result is ``""``.
    """
    p = as_parser(parser)

    def discard(cursor: Cursor) -> str:
        p(cursor)
        return ""

    return Parser(discard, f"ignore({p.name})")


def back(parser: ParserLike) -> Parser:
    """Make parser atomic: on failure, rewind the cursor and re-raise.

    Example:
        >>> cursor = Cursor("abx")
        >>> from simparse import string
        >>> back(string("abc"))(cursor)  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        simparse.diagnostics.errors.ConditionUnsatisfied: ...
        >>> cursor.pos
        0
    """
    p = as_parser(parser)

    def backtrack(cursor: Cursor) -> str:
        snapshot = cursor.copy()
        try:
            return p(cursor)
        except ParseError:
            cursor.restore(snapshot)
            raise

    return Parser(backtrack, f"back({p.name})")


def peek(parser: ParserLike) -> Parser:
    """Zero-width lookahead: run parser, then always rewind the cursor.

    Success and failure propagate exactly as the wrapped parser reports
    them; only the cursor movement is undone.

    Example:
        >>> from simparse import string
        >>> cursor = Cursor("abc")
        >>> peek(string("ab"))(cursor), cursor.pos
        ('ab', 0)
    """
    p = as_parser(parser)

    def lookahead(cursor: Cursor) -> str:
        snapshot = cursor.copy()
        try:
            return p(cursor)
        finally:
            cursor.restore(snapshot)

    return Parser(lookahead, f"peek({p.name})")


class Forward(Parser):
    """Placeholder parser for recursive grammars.

    Create it first, reference it while building the grammar, then bind
    it with define(). Every invocation enters a DepthGuard, so nesting
    deeper than max_depth raises DepthLimitExceededError. The limit counts
    this declaration only: mutually recursive declarations each keep their
    own count. If the interpreter recursion limit is reached first (deep
    per-level frames, mutual recursion), the outermost invocation turns the
    RecursionError into DepthLimitExceededError as well.

    Not thread-safe: the depth count lives on the declaration, so one
    grammar must not run on several threads at once.

    Example:
        >>> from simparse import character, string
        >>> nested = forward()
        >>> nested.define(back(character("(") + nested + character(")")) | string(""))
        >>> nested.parse("(())").value
        '(())'
    """

    __slots__ = ("_guard", "_target")

    def __init__(self, name: str = "forward()", max_depth: int = MAX_DEPTH) -> None:
        """Create an undefined forward declaration.

        Args:
            name: Display name
            max_depth: Maximum nesting of this parser within one parse
        """
        super().__init__(self._undefined, name)
        self._guard = DepthGuard(max_depth=max_depth)
        self._target: Parser | None = None

    @property
    def is_defined(self) -> bool:
        """True once define() has been called."""
        return self._target is not None

    @property
    def max_depth(self) -> int:
        """Effective depth limit (after clamping to the recursion limit)."""
        return self._guard.max_depth

    def define(self, parser: ParserLike) -> None:
        """Bind the declaration to its definition.

        May be called again to rebind; parsers already referencing this
        declaration see the new definition.
        """
        self._target = as_parser(parser)
        self._fn = self._guarded

    def named(self, name: str) -> Parser:
        """Label this declaration in place and enable DEBUG tracing.

        Unlike Parser.named(), returns self: copies taken before define()
        would stay undefined forever.
        """
        self.name = name
        self._traced = True
        return self

    def _undefined(self, cursor: Cursor) -> str:
        raise UndefinedParserError(ErrorTemplate.undefined_forward(self.name))

    def _guarded(self, cursor: Cursor) -> str:
        assert self._target is not None  # set together with _fn in define()
        if self._guard.depth:
            with self._guard:
                return self._target(cursor)

        # Outermost entry: the only frame sure to have stack left to report in
        try:
            with self._guard:
                return self._target(cursor)
        except RecursionError as e:
            raise DepthLimitExceededError(
                ErrorTemplate.recursion_limit_exceeded(self.name, self.max_depth)
            ) from e
        finally:
            # Inner __exit__ calls can fail while the stack is exhausted
            self._guard.reset()


def forward(name: str = "forward()", *, max_depth: int = MAX_DEPTH) -> Forward:
    """Return an undefined parser to be bound later with define().

    Args:
        name: Display name used in repr() and diagnostics
        max_depth: Maximum recursion depth (default: MAX_DEPTH)
    """
    return Forward(name, max_depth)
