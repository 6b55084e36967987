"""Primitive parsers: single characters and literal strings.

satisfy() is the only primitive with an all-or-nothing guarantee: it
either consumes exactly one accepted character or leaves the cursor
untouched. string() consumes character by character and is therefore
NOT atomic for literals longer than one character.

Character classes are single-byte and locale-independent (ASCII / C
locale). See constants.py for the exact sets.
"""

from collections.abc import Callable

from simparse.constants import ASCII_ALNUM, ASCII_DIGITS, ASCII_LETTERS, ASCII_WHITESPACE
from simparse.cursor import Cursor
from simparse.diagnostics import ConditionUnsatisfied, ErrorTemplate
from simparse.parser.core import Parser

__all__ = [
    "alphabet",
    "alphanumeric",
    "any_char",
    "character",
    "digit",
    "exclude",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_space",
    "satisfy",
    "string",
    "whitespace",
]


def is_digit(ch: str) -> bool:
    """ASCII decimal digit (0-9). Rejects Unicode digits such as '²'."""
    return ch in ASCII_DIGITS


def is_alpha(ch: str) -> bool:
    """ASCII letter (a-z, A-Z)."""
    return ch in ASCII_LETTERS


def is_alnum(ch: str) -> bool:
    """ASCII letter or digit."""
    return ch in ASCII_ALNUM


def is_space(ch: str) -> bool:
    """C-locale whitespace: space, \\t, \\n, \\v, \\f, \\r."""
    return ch in ASCII_WHITESPACE


def _always(_ch: str) -> bool:
    return True


def satisfy(predicate: Callable[[str], bool], name: str | None = None) -> Parser:
    """Parse one character accepted by predicate.

    Args:
        predicate: Called with the current character
        name: Display name (defaults to ``satisfy(<predicate name>)``)

    Returns:
        Parser returning the accepted character

    The returned parser raises EndOfInput at end of input and
    ConditionUnsatisfied when the predicate rejects the character; in
    both cases the cursor is left where it was.

    Example:
        >>> vowel = satisfy(lambda c: c in "aeiou")
        >>> cursor = Cursor("ab")
        >>> vowel(cursor), cursor.pos
        ('a', 1)
    """

    def satisfy_char(cursor: Cursor) -> str:
        ch = cursor.current
        if not predicate(ch):
            raise ConditionUnsatisfied(ErrorTemplate.condition_unsatisfied(ch, cursor.pos))
        cursor.advance()
        return ch

    if name is None:
        name = f"satisfy({getattr(predicate, '__name__', repr(predicate))})"
    return Parser(satisfy_char, name)


def _single_char(c: str, caller: str) -> None:
    if len(c) != 1:
        msg = f"{caller}() expects a single character, got {c!r}"
        raise ValueError(msg)


def character(c: str) -> Parser:
    """Parse exactly the character c.

    Raises:
        ValueError: If c is not a single character
    """
    _single_char(c, "character")
    return satisfy(lambda s: s == c, name=f"character({c!r})")


def exclude(c: str) -> Parser:
    """Parse any single character except c.

    Typical use is scanning up to a delimiter: ``many(exclude('"'))``.

    Raises:
        ValueError: If c is not a single character
    """
    _single_char(c, "exclude")
    return satisfy(lambda s: s != c, name=f"exclude({c!r})")


def string(literal: str) -> Parser:
    """Parse the exact text literal.

    Characters are matched and consumed one at a time. On a mismatch the
    already-matched prefix STAYS consumed: after ``string("abc")`` fails
    on ``"abx"`` the cursor sits before ``'x'``. Wrap in back() when the
    literal must be matched atomically, in particular as the left operand
    of ``|``.

    An empty literal always succeeds without consuming input.

    Example:
        >>> cursor = Cursor("abx")
        >>> string("abc")(cursor)
        Traceback (most recent call last):
        ...
        simparse.diagnostics.errors.ConditionUnsatisfied: Expected 'c' while matching 'abc', found 'x'
        >>> cursor.pos
        2
    """

    def match_string(cursor: Cursor) -> str:
        for expected in literal:
            ch = cursor.current
            if ch != expected:
                raise ConditionUnsatisfied(
                    ErrorTemplate.string_mismatch(literal, expected, ch, cursor.pos)
                )
            cursor.advance()
        return literal

    return Parser(match_string, f"string({literal!r})")


# Named character classes
any_char: Parser = satisfy(_always, name="any_char")
digit: Parser = satisfy(is_digit, name="digit")
alphabet: Parser = satisfy(is_alpha, name="alphabet")
alphanumeric: Parser = satisfy(is_alnum, name="alphanumeric")
whitespace: Parser = satisfy(is_space, name="whitespace")
