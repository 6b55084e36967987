"""Parser-combinator engine.

Module Organization:
- core.py: Parser class, sequencing (+, seq) and alternation (|, alt)
- primitives.py: satisfy, character, exclude, string, character classes
- combinators.py: rep, many, ignore, back, peek, forward

Public API:
    Parser: Composable parser object
    Forward: Forward declaration for recursive grammars
"""

from simparse.parser.combinators import Forward, back, forward, ignore, many, peek, rep
from simparse.parser.core import Parser, ParserLike, alt, as_parser, seq
from simparse.parser.primitives import (
    alphabet,
    alphanumeric,
    any_char,
    character,
    digit,
    exclude,
    is_alnum,
    is_alpha,
    is_digit,
    is_space,
    satisfy,
    string,
    whitespace,
)

__all__ = [
    "Forward",
    "Parser",
    "ParserLike",
    "alphabet",
    "alphanumeric",
    "alt",
    "any_char",
    "as_parser",
    "back",
    "character",
    "digit",
    "exclude",
    "forward",
    "ignore",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_space",
    "many",
    "peek",
    "rep",
    "satisfy",
    "seq",
    "string",
    "whitespace",
]
