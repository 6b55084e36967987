"""Parser objects and the two structural operators.

A parser is any callable taking a mutable Cursor and returning a string.
Parser wraps such a callable so it can be composed with ``+`` (sequencing)
and ``|`` (alternation), named for debug logging, and run from the top
with Parser.parse().

Failure Model:
    A parser signals failure by raising ParseError. Neither ``+`` nor ``|``
    restores the cursor: a failed alternative may leave input consumed,
    and the next alternative starts from wherever the cursor was left.
    Wrap alternatives in back() for conventional backtracking.

    The first alternative below consumes 'a' before failing, so the
    second one starts at 'c':

    >>> from simparse import back, string
    >>> parser = string("ab") | string("ac")
    >>> parser.parse("ac")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    simparse.diagnostics.errors.ConditionUnsatisfied: ...
    >>> (back(string("ab")) | back(string("ac"))).parse("ac").value
    'ac'

Debug Logging:
    Parsers labelled with named() emit DEBUG records on logger
    ``simparse.parser.core``:

        import logging
        logging.basicConfig(level=logging.DEBUG)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal, TypeAlias, Union

from simparse.cursor import Cursor, ParseResult
from simparse.diagnostics import ParseError

__all__ = ["Parser", "ParserLike", "alt", "as_parser", "seq"]

logger = logging.getLogger(__name__)

ParserFn: TypeAlias = Callable[[Cursor], str]
ParserLike: TypeAlias = Union["Parser", Callable[[Cursor], str]]
_Kind: TypeAlias = Literal["leaf", "seq", "alt"]


class Parser:
    """Composable parser over a shared mutable Cursor.

    Parsers are immutable once built: named() returns a new object, so the
    module-level primitives (digit, whitespace, ...) can be shared freely.

    Attributes:
        name: Human-readable description used in repr() and debug logs
    """

    __slots__ = ("_fn", "_kind", "_parts", "_traced", "name")

    def __init__(
        self,
        fn: ParserFn,
        name: str | None = None,
        *,
        traced: bool = False,
        kind: _Kind = "leaf",
        parts: tuple[Parser, ...] = (),
    ) -> None:
        """Wrap a cursor function.

        Args:
            fn: Callable advancing the cursor and returning the parsed text
            name: Display name (defaults to the function's __name__)
            traced: Emit DEBUG records on every invocation
            kind: Structural kind, used to flatten chained + and |
            parts: Operands of a seq/alt parser
        """
        self._fn = fn
        self.name = name if name is not None else getattr(fn, "__name__", repr(fn))
        self._traced = traced
        self._kind = kind
        self._parts = parts

    def __call__(self, cursor: Cursor) -> str:
        """Run the parser at the cursor.

        Returns:
            The parsed text (possibly empty)

        Raises:
            ParseError: If the input does not match
        """
        if self._traced and logger.isEnabledFor(logging.DEBUG):
            return self._call_traced(cursor)
        return self._fn(cursor)

    def _call_traced(self, cursor: Cursor) -> str:
        start = cursor.pos
        logger.debug("trying %s at position %d", self.name, start)
        try:
            value = self._fn(cursor)
        except ParseError as e:
            logger.debug("failed %s at position %d: %s", self.name, cursor.pos, e)
            raise
        logger.debug("matched %s: %r, position %d -> %d", self.name, value, start, cursor.pos)
        return value

    def named(self, name: str) -> Parser:
        """Return a copy of this parser labelled for debugging.

        The name is used in repr() and, for named parsers, in the DEBUG
        parsing log.

        Example:
            >>> from simparse import digit, many
            >>> number = many(digit).named("number")
            >>> number.name
            'number'
        """
        return Parser(self._fn, name, traced=True)

    def parse(self, source: str, pos: int = 0) -> ParseResult[str]:
        """Parse source from pos and return the value with the final cursor.

        Trailing input is not an error; inspect ``result.remaining``.

        Args:
            source: Text to parse
            pos: Start position (default: 0)

        Returns:
            ParseResult holding the parsed text and the advanced cursor

        Raises:
            ParseError: If the parser fails
        """
        cursor = Cursor(source, pos)
        value = self(cursor)
        return ParseResult(value, cursor)

    def __add__(self, other: ParserLike) -> Parser:
        return seq(self, other)

    def __radd__(self, other: ParserLike) -> Parser:
        return seq(other, self)

    def __or__(self, other: ParserLike) -> Parser:
        return alt(self, other)

    def __ror__(self, other: ParserLike) -> Parser:
        return alt(other, self)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"


def as_parser(parser: ParserLike) -> Parser:
    """Coerce a plain cursor function into a Parser.

    Raises:
        TypeError: If parser is not callable
    """
    if isinstance(parser, Parser):
        return parser
    if callable(parser):
        return Parser(parser)
    msg = f"Expected a Parser or a callable taking a Cursor, got {type(parser).__name__}"
    raise TypeError(msg)


def _flatten(kind: _Kind, parsers: tuple[ParserLike, ...]) -> tuple[Parser, ...]:
    """Splice unnamed operands of the same kind into one flat tuple.

    Both operators are associative, so ``(f + g) + h`` and ``f + g + h``
    behave identically; flattening only saves stack frames.
    """
    flat: list[Parser] = []
    for parser in map(as_parser, parsers):
        if parser._kind == kind and not parser._traced:
            flat.extend(parser._parts)
        else:
            flat.append(parser)
    return tuple(flat)


def _operand_name(parser: Parser, kind: _Kind) -> str:
    # Alternation binds looser than sequencing
    if kind == "seq" and parser._kind == "alt" and not parser._traced:
        return f"({parser.name})"
    return parser.name


def seq(*parsers: ParserLike) -> Parser:
    """Run parsers one after another, concatenating their results.

    ``seq(f, g)`` is ``f + g``. There is no rollback: if a later parser
    fails, the input consumed by earlier ones stays consumed.

    Example:
        >>> from simparse import character, digit
        >>> (character("a") + digit).parse("a1").value
        'a1'
        >>> seq().parse("xyz").value
        ''
    """
    parts = _flatten("seq", parsers)

    def sequence(cursor: Cursor) -> str:
        return "".join([parser(cursor) for parser in parts])

    name = " + ".join(_operand_name(p, "seq") for p in parts) if parts else "seq()"
    return Parser(sequence, name, kind="seq", parts=parts)


def alt(*parsers: ParserLike) -> Parser:
    """Try parsers in order, returning the first success.

    ``alt(f, g)`` is ``f | g``. The cursor is NOT restored between
    attempts: each alternative starts wherever the previous one stopped.
    When every alternative fails, the last failure propagates.

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        msg = "alt() requires at least one parser"
        raise ValueError(msg)
    parts = _flatten("alt", parsers)
    *alternatives, last = parts

    def alternation(cursor: Cursor) -> str:
        for parser in alternatives:
            try:
                return parser(cursor)
            except ParseError:
                continue
        return last(cursor)

    name = " | ".join(_operand_name(p, "alt") for p in parts)
    return Parser(alternation, name, kind="alt", parts=parts)
