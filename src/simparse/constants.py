"""Shared constants for simparse.

This module provides centralized configuration constants used across
the cursor, primitive parsers, and combinators. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for forward-declared parsers
- Character classes: Single-byte, locale-independent classification sets

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Character classes
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "ASCII_ALNUM",
    "ASCII_WHITESPACE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default maximum nesting for recursive grammars built with forward().
# Each invocation of a forward-declared parser counts as one level.
# Clamped at runtime against sys.getrecursionlimit() (see core.depth_guard).
MAX_DEPTH: int = 100

# ============================================================================
# CHARACTER CLASSES
# ============================================================================
#
# Classification is single-byte and locale-independent (C locale).
# str.isdigit() / str.isalpha() / str.isspace() are Unicode-aware and accept
# characters such as "²", "é" or U+00A0, so they are NOT used by primitives.

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

ASCII_ALNUM: frozenset[str] = ASCII_LETTERS | ASCII_DIGITS

# Same set as C isspace() in the "C" locale: SP, HT, LF, VT, FF, CR.
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")
