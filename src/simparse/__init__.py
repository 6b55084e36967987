"""simparse - composable parser combinators over a shared cursor.

Small parsing units (satisfy, character, string, digit, ...) are combined
with sequencing (+), alternation (|), repetition (rep, many), suppression
(ignore), backtracking (back) and lookahead (peek) into readers for
ad-hoc text formats. Every parser advances one mutable Cursor in place
and returns the text it matched, or raises ParseError.

Only back() and peek() ever move the cursor backwards. A compound parser
that fails part-way leaves its partial consumption behind, including
inside ``|``: wrap alternatives in back() for conventional backtracking.

Public API:
    Cursor - Mutable position over in-memory text
    Parser - Composable parser object (also: Forward, ParseResult)
    satisfy, character, exclude, string - Primitive parsers
    any_char, digit, alphabet, alphanumeric, whitespace - Character classes
    seq, alt, rep, many, ignore, back, peek, forward - Combinators

Exceptions:
    SimparseError - Base exception class
    ParseError - Input did not match (EndOfInput, ConditionUnsatisfied)
    GrammarError - Malformed grammar (UndefinedParserError, DepthLimitExceededError)

Example:
    >>> from simparse import back, many, string, whitespace
    >>> label = back(string("VARIABLES") + many(whitespace) + string("="))
    >>> label.parse("VARIABLES = 1").value
    'VARIABLES ='
"""

from .core import DepthLimitExceededError
from .cursor import Cursor, ParseResult
from .diagnostics import (
    ConditionUnsatisfied,
    EndOfInput,
    GrammarError,
    ParseError,
    SimparseError,
    UndefinedParserError,
)
from .parser import (
    Forward,
    Parser,
    alphabet,
    alphanumeric,
    alt,
    any_char,
    back,
    character,
    digit,
    exclude,
    forward,
    ignore,
    many,
    peek,
    rep,
    satisfy,
    seq,
    string,
    whitespace,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("simparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConditionUnsatisfied",
    "Cursor",
    "DepthLimitExceededError",
    "EndOfInput",
    "Forward",
    "GrammarError",
    "ParseError",
    "ParseResult",
    "Parser",
    "SimparseError",
    "UndefinedParserError",
    "__version__",
    "alphabet",
    "alphanumeric",
    "alt",
    "any_char",
    "back",
    "character",
    "digit",
    "exclude",
    "forward",
    "ignore",
    "many",
    "peek",
    "rep",
    "satisfy",
    "seq",
    "string",
    "whitespace",
]
