"""Shared plumbing for timer-driven wrappers."""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Real
from typing import Any, TypeVar

from fnkit.kernel.env import Env
from fnkit.kernel.ports import SchedulerPort
from fnkit.kernel.wrapper import Wrapper
from fnkit.runtime.scheduler import default_scheduler

R = TypeVar("R")


def validate_delay(delay: Any) -> float:
    """Check a delay in seconds.

    Raises:
        ValueError: If the delay is not a finite, non-negative number
    """
    if isinstance(delay, bool) or not isinstance(delay, Real):
        raise ValueError(f"delay must be a number of seconds, got {type(delay).__name__}")
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(f"delay must be finite and non-negative, got {delay!r}")
    return float(delay)


class TimedWrapper(Wrapper[R]):
    """Wrapper owning at most one scheduled callback at a time.

    ``_generation`` is bumped whenever the pending callback changes, so a
    callback that was cancelled but already dispatched sees a stale
    generation and does nothing.
    """

    def __init__(self, func: Callable[..., R], delay: float, env: Env | None = None) -> None:
        super().__init__(func, env)
        self.delay = validate_delay(delay)
        self._handle: Any = None
        self._handle_scheduler: SchedulerPort | None = None
        self._generation = 0

    def _scheduler(self) -> SchedulerPort:
        return self.env.scheduler or default_scheduler()

    def _schedule(self, callback: Callable[[int], None]) -> int:
        """Replace any pending callback with ``callback``. Caller holds the lock."""
        self._cancel_pending()
        self._generation += 1
        generation = self._generation
        scheduler = self._scheduler()
        self._handle = scheduler.schedule(lambda: callback(generation), self.delay)
        self._handle_scheduler = scheduler
        return generation

    def _cancel_pending(self) -> bool:
        """Cancel the pending callback, if any. Caller holds the lock."""
        if self._handle is None:
            return False
        assert self._handle_scheduler is not None
        self._handle_scheduler.cancel(self._handle)
        self._clear_pending()
        return True

    def _clear_pending(self) -> None:
        self._generation += 1
        self._handle = None
        self._handle_scheduler = None

    def _claim(self, generation: int) -> bool:
        """Take ownership of a firing callback. Caller holds the lock."""
        if generation != self._generation or self._handle is None:
            return False
        self._handle = None
        self._handle_scheduler = None
        return True
