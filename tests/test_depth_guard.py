"""Tests for core/depth_guard.py.

Tests DepthGuard context manager and depth_clamp() with Hypothesis for
property-based testing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from simparse.constants import MAX_DEPTH
from simparse.core.depth_guard import DepthGuard, DepthLimitExceededError, depth_clamp
from simparse.diagnostics import DiagnosticCode, GrammarError

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard uses MAX_DEPTH by default."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0

    def test_custom_max_depth(self) -> None:
        """DepthGuard accepts custom max_depth."""
        guard = DepthGuard(max_depth=50)

        assert guard.max_depth == 50

    def test_rejects_non_positive(self) -> None:
        """Zero and negative limits are invalid."""
        with pytest.raises(ValueError, match="positive"):
            DepthGuard(max_depth=0)

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against recursion limit."""
        guard = DepthGuard(max_depth=sys.getrecursionlimit() + 1000)

        assert guard.max_depth < sys.getrecursionlimit()


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_context_manager_tracks_depth(self) -> None:
        """Entering increments, exiting decrements."""
        guard = DepthGuard(max_depth=10)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
            assert guard.depth == 1

        assert guard.depth == 0

    def test_exceeding_limit_raises(self) -> None:
        """Entering beyond max_depth raises DepthLimitExceededError."""
        guard = DepthGuard(max_depth=2)

        with pytest.raises(DepthLimitExceededError) as exc_info, guard, guard, guard:
            pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert guard.depth == 0

    def test_error_is_grammar_error(self) -> None:
        """Depth errors belong to the GrammarError branch."""
        assert issubclass(DepthLimitExceededError, GrammarError)

    def test_exception_inside_still_decrements(self) -> None:
        """Depth is restored when the guarded block raises."""
        guard = DepthGuard(max_depth=5)

        with pytest.raises(RuntimeError), guard:
            raise RuntimeError

        assert guard.depth == 0

    def test_reset(self) -> None:
        """reset() zeroes the counter."""
        guard = DepthGuard()
        guard.__enter__()
        guard.reset()

        assert guard.depth == 0

    @given(depth=st.integers(min_value=1, max_value=50))
    def test_exactly_max_depth_levels_allowed(self, depth: int) -> None:
        """PROPERTY: max_depth nested entries succeed, one more fails."""
        guard = DepthGuard(max_depth=depth)

        for _ in range(depth):
            guard.__enter__()
        assert guard.depth == depth

        with pytest.raises(DepthLimitExceededError):
            guard.__enter__()
        assert guard.depth == depth


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Test depth_clamp()."""

    def test_small_depth_unchanged(self) -> None:
        """Depths well below the recursion limit pass through."""
        assert depth_clamp(10) == 10

    def test_large_depth_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Oversized depths are clamped and logged at WARNING."""
        requested = sys.getrecursionlimit() * 10

        with caplog.at_level(logging.WARNING, logger="simparse.core.depth_guard"):
            clamped = depth_clamp(requested)

        assert clamped < requested
        assert clamped >= 1
        assert any("Clamping" in r.getMessage() for r in caplog.records)

    @given(requested=st.integers(min_value=1, max_value=100_000))
    def test_never_exceeds_recursion_limit(self, requested: int) -> None:
        """PROPERTY: the clamped depth never exceeds the interpreter limit."""
        assert 1 <= depth_clamp(requested) < sys.getrecursionlimit()
