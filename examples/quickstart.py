"""Quickstart example for simparse.

This example demonstrates the primitives, the combinators, and how
failures are reported.

Note: string() and compound parsers keep partial consumption on failure.
Wrap alternatives in back() whenever they share a prefix.
"""

import logging

from simparse import (
    Cursor,
    ParseError,
    back,
    character,
    digit,
    exclude,
    forward,
    ignore,
    many,
    peek,
    rep,
    string,
    whitespace,
)
from simparse.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Primitives on a shared cursor
print("=" * 50)
print("Example 1: Primitives")
print("=" * 50)

cursor = Cursor("42 apples")
print(many(digit)(cursor))
# Output: 42
print(ignore(many(whitespace))(cursor) == "", cursor.pos)
# Output: True 3
print(cursor.slice_to(len(cursor.source)))
# Output: apples

# Example 2: Sequencing and repetition
print("\n" + "=" * 50)
print("Example 2: Sequencing and Repetition")
print("=" * 50)

date = rep(4, digit) + character("-") + rep(2, digit) + character("-") + rep(2, digit)
print(date.parse("2024-01-31").value)
# Output: 2024-01-31

quoted = ignore(character('"')) + many(exclude('"')) + ignore(character('"'))
print(quoted.parse('"hello, world" tail').value)
# Output: hello, world

# Example 3: Alternation needs back() for shared prefixes
print("\n" + "=" * 50)
print("Example 3: Alternation and back()")
print("=" * 50)

try:
    (string("ab") | string("ac")).parse("ac")
except ParseError as e:
    print(f"without back(): {e}")
# Output: without back(): Expected 'b' while matching 'ab', found 'c'
# ('a' stays consumed, so string("ac") then starts at 'c')

print((back(string("ab")) | back(string("ac"))).parse("ac").value)
# Output: ac

# Example 4: Lookahead
print("\n" + "=" * 50)
print("Example 4: peek()")
print("=" * 50)

cursor = Cursor("7up")
print(peek(digit)(cursor), cursor.pos)
# Output: 7 0

# Example 5: Recursive grammar
print("\n" + "=" * 50)
print("Example 5: forward()")
print("=" * 50)

nested = forward("nested")
nested.define(back(character("(") + nested + character(")")) | string(""))
print(nested.parse("((()))").value)
# Output: ((()))

# Example 6: Diagnostics
print("\n" + "=" * 50)
print("Example 6: Diagnostics")
print("=" * 50)

source = "2024-1-31"
try:
    date.parse(source)
except ParseError as e:
    print(e.format_with_context(source))
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

# Example 7: Tracing named parsers
print("\n" + "=" * 50)
print("Example 7: Debug Tracing")
print("=" * 50)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
number = many(digit).named("number")
pair = number + character(",") + number
pair.parse("12,34")
# simparse.parser.core: trying number at position 0
# simparse.parser.core: matched number: '12', position 0 -> 2
# ...
