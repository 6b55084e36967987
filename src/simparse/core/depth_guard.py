"""Depth limiting for recursive grammars.

Forward-declared parsers (see parser.combinators.forward) make grammars
recursive. A left-recursive rule, or adversarially deep input, would
otherwise end in RecursionError deep inside the interpreter. DepthGuard
turns that into a DepthLimitExceededError raised at a predictable depth.

Single-threaded: the counter is plain instance state with no locking, and
each forward declaration owns one guard shared by every parse it runs.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from simparse.constants import MAX_DEPTH
from simparse.diagnostics import ErrorTemplate, GrammarError

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# Estimated interpreter frames per level of forward() recursion in a simple
# grammar such as back(a + nested + b) | c. Grammars with more combinators
# per level use more; Forward converts the resulting RecursionError.
_FRAMES_PER_LEVEL: int = 8


class DepthLimitExceededError(GrammarError):
    """Raised when maximum parser nesting depth is exceeded.

    This error indicates either:
    - A left-recursive grammar that never consumes input
    - Input nested deeper than the grammar's configured limit

    Not a ParseError: alternation and repetition do not swallow it.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard:
            return parser(cursor)

    Mutability Note:
        Intentionally mutable to enable stateful depth tracking via the
        context manager protocol. current_depth is incremented on
        __enter__ and decremented on __exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate and clamp max_depth against Python recursion limit.

        Raises:
            ValueError: If max_depth is not positive
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Checks the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def reset(self) -> None:
        """Reset depth to zero."""
        self.current_depth = 0


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each level of a recursive grammar costs several interpreter frames
    (the forward parser, the combinators it wraps, the primitives), so the
    limit is also divided by a per-level frame estimate.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)  # doctest: +SKIP
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)  # doctest: +SKIP
        118
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // _FRAMES_PER_LEVEL)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
