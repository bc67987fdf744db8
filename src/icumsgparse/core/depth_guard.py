"""Recursion limits for parsing and tree walking.

Message trees are walked recursively, so a hand-built tree (or a parser
configured with a huge nesting limit) could otherwise run Python out of
stack. Two tools keep recursion bounded:

- depth_clamp: caps a configured limit so it fits under sys.getrecursionlimit()
- DepthGuard: counts tree levels during a walk and raises past the cap

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icumsgparse.constants import MAX_DEPTH
from icumsgparse.diagnostics import MessageFormatError
from icumsgparse.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(MessageFormatError):
    """A message tree is nested deeper than the walker allows.

    Parsed trees never trigger this with default limits; it signals a
    programmatically constructed tree that bypassed the parser.
    """


@dataclass(slots=True)
class DepthGuard:
    """Level counter entered once per tree level of a walk.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard:
        ...     with guard:
        ...         guard.depth
        2

    Mutable on purpose: one guard belongs to one walker instance, and
    __enter__/__exit__ move current_depth up and down.

    Attributes:
        max_depth: Levels allowed (clamped against the recursion limit)
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter one level deeper.

        The limit is checked before counting, since __exit__ does not run
        when __enter__ raises.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Levels currently entered."""
        return self.current_depth

    def check(self) -> None:
        """Raise if no further level may be entered.

        Raises:
            DepthLimitExceededError: current_depth has reached max_depth
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.traversal_depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, *, frames_per_level: int = 1, reserve_frames: int = 50) -> int:
    """Cap a level limit so the recursion it allows fits on the stack.

    Args:
        requested_depth: Configured limit in levels
        frames_per_level: Python frames one level of recursion costs
        reserve_frames: Frames kept free for callers and test harnesses

    Returns:
        requested_depth, or the largest level count that fits

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(100, frames_per_level=5)
        100
        >>> depth_clamp(500, frames_per_level=5)
        190
    """
    available = sys.getrecursionlimit() - reserve_frames
    max_levels = available // frames_per_level
    if requested_depth > max_levels:
        logger.warning(
            "Clamping nesting limit %d to %d: %d levels need more than the %d "
            "frames left under sys.getrecursionlimit().",
            requested_depth,
            max_levels,
            requested_depth,
            available,
        )
        return max_levels
    return requested_depth
