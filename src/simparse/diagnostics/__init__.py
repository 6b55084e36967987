"""Diagnostic system for simparse errors.

Provides structured error diagnostics with codes, positions and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConditionUnsatisfied,
    EndOfInput,
    GrammarError,
    ParseError,
    SimparseError,
    UndefinedParserError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConditionUnsatisfied",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EndOfInput",
    "ErrorTemplate",
    "GrammarError",
    "OutputFormat",
    "ParseError",
    "SimparseError",
    "UndefinedParserError",
]
