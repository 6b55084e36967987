"""Shared pytest configuration for simparse tests.

Hypothesis profiles:
- dev: default locally, 200 examples per property
- ci: 50 derandomized examples so CI failures reproduce exactly
- verbose: 100 examples with per-example output, for debugging a law

Selection: HYPOTHESIS_PROFILE wins, then CI=true picks "ci", else "dev".
Example: HYPOTHESIS_PROFILE=verbose pytest tests/test_parser_laws_hypothesis.py
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import Verbosity, settings

# Parser inputs are short strings; no property needs more than a few ms.
settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose)

_PROFILES = frozenset({"dev", "ci", "verbose"})


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit is not None and explicit in _PROFILES:
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def parser_trace(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture the DEBUG trace emitted by parsers labelled with named()."""
    with caplog.at_level(logging.DEBUG, logger="simparse.parser.core"):
        yield caplog
