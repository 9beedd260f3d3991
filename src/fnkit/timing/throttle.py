"""Leading-edge throttle."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from fnkit.kernel.env import Env
from fnkit.timing.base import TimedWrapper

R = TypeVar("R")

logger = logging.getLogger(__name__)


class Throttled(TimedWrapper[R]):
    """Runs the wrapped function at most once per ``delay`` window.

    The call that opens a window runs synchronously and returns the
    result; calls inside the window are dropped and return None. Nothing
    is queued for the end of the window.
    """

    kind = "throttle"

    def __init__(self, func: Callable[..., R], delay: float, env: Env | None = None) -> None:
        super().__init__(func, delay, env)
        self._cooling = False
        self._window = 0

    @property
    def cooling(self) -> bool:
        """Whether a cooldown window is active."""
        with self._lock:
            return self._cooling

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> R | None:
        with self._lock:
            if self._cooling:
                self._record("drop")
                logger.debug("Dropped throttled call to %s", self.name)
                return None
            # Taken before the call so re-entrant calls are dropped too.
            self._cooling = True
            self._window += 1
            window = self._window

        self._record("invoke")
        try:
            result = self._apply(receiver, args, kwargs)
        except BaseException:
            with self._lock:
                if self._window == window:
                    self._cooling = False
            raise

        with self._lock:
            # A cancel() during the call closed this window already.
            if not self._cooling or self._window != window:
                return result
            generation = self._schedule(self._reset)
            self._record("cooldown", delay=self.delay, generation=generation)
        return result

    def _reset(self, generation: int) -> None:
        with self._lock:
            if not self._claim(generation):
                return
            self._cooling = False
        self._record("reset")

    def cancel(self) -> bool:
        """End the active cooldown so the next call runs immediately.

        Returns:
            True if a cooldown was active
        """
        with self._lock:
            was_cooling = self._cooling
            self._cancel_pending()
            self._cooling = False
        if was_cooling:
            self._record("reset", cancelled=True)
        return was_cooling


def throttle(func: Callable[..., R], delay: float, *, env: Env | None = None) -> Throttled[R]:
    """Run ``func`` at most once every ``delay`` seconds.

    Args:
        func: The function to throttle
        delay: Cooldown window in seconds
        env: Optional environment with scheduler and trace

    Returns:
        A Throttled wrapper
    """
    return Throttled(func, delay, env)
