"""Variable List Example - A Small Format Reader Built From Combinators.

Reads a labeled, comma-delimited list of quoted names such as:

    VARIABLES= "var1", "var2" ,"var3" , "var4"

Demonstrates:

1. Building a label parser and an item parser from primitives
2. Calling a parser repeatedly on one shared cursor
3. Why both parsers are wrapped in back()
4. Reporting a failure with source context

Python 3.13+.
"""

from __future__ import annotations

from simparse import (
    Cursor,
    ParseError,
    Parser,
    alphanumeric,
    back,
    ignore,
    many,
    string,
    whitespace,
)


def label_parser() -> Parser:
    """``VARIABLES`` then ``=`` with optional spaces on either side."""
    return back(
        string("VARIABLES")
        + many(whitespace)
        + string("=")
        + many(whitespace)
    ).named("label")


def item_parser() -> Parser:
    """One quoted name plus any trailing separator.

    The quotes and the separator are ignored, so the value is the bare name.
    """
    separator = many(whitespace) + many(string(",")) + many(whitespace)
    return back(
        ignore(string('"'))
        + many(alphanumeric)
        + ignore(string('"'))
        + ignore(separator)
    ).named("item")


def read_variables(source: str) -> list[str]:
    """Return the names listed after the ``VARIABLES=`` label.

    Raises:
        ParseError: If the label is missing
    """
    cursor = Cursor(source)
    label_parser()(cursor)

    item = item_parser()
    names: list[str] = []
    while True:
        try:
            names.append(item(cursor))
        except ParseError:
            break
    return names


def example_1_step_by_step() -> None:
    """Drive the label and item parsers by hand."""
    print("=" * 60)
    print("Example 1: Step by Step")
    print("=" * 60)

    source = 'VARIABLES= "var1", "var2" ,"var3" , "var4"'
    cursor = Cursor(source)

    print(f"label: {label_parser()(cursor)!r} (cursor at {cursor.pos})")

    item = item_parser()
    while not cursor.is_eof:
        print(f"item:  {item(cursor)!r} (cursor at {cursor.pos})")

    try:
        item(cursor)
    except ParseError as e:
        print(f"end:   {e}")
    print()


def example_2_whole_list() -> None:
    """Collect every name in one call."""
    print("=" * 60)
    print("Example 2: Whole List")
    print("=" * 60)

    print(read_variables('VARIABLES = "x" "y","z"'))
    print()


def example_3_error_context() -> None:
    """Show where a malformed label stops matching."""
    print("=" * 60)
    print("Example 3: Error Context")
    print("=" * 60)

    source = 'VARIABLES: "var1"'
    try:
        read_variables(source)
    except ParseError as e:
        print(e.format_with_context(source))
        if e.diagnostic is not None:
            print()
            print(e.diagnostic.format_error())
    print()


if __name__ == "__main__":
    example_1_step_by_step()
    example_2_whole_list()
    example_3_error_context()
