"""Trailing-edge debounce."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from fnkit.kernel.env import Env
from fnkit.timing.base import TimedWrapper

R = TypeVar("R")

logger = logging.getLogger(__name__)


class Debounced(TimedWrapper[R]):
    """Runs the wrapped function once calls have been quiet for ``delay``.

    Every call replaces the pending invocation, so the arguments of the
    last call before the quiet period win. Calls return None; the deferred
    result is discarded.
    """

    kind = "debounce"

    def __init__(self, func: Callable[..., R], delay: float, env: Env | None = None) -> None:
        super().__init__(func, delay, env)
        self._pending_call: tuple[Any, tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def pending(self) -> bool:
        """Whether an invocation is scheduled."""
        with self._lock:
            return self._handle is not None

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        with self._lock:
            if self._cancel_pending():
                self._record("cancel")
            self._pending_call = (receiver, args, kwargs)
            generation = self._schedule(self._fire)
            self._record("schedule", delay=self.delay, generation=generation)
            logger.debug("Debounced %s for %.3fs", self.name, self.delay)

    def _fire(self, generation: int) -> None:
        with self._lock:
            if not self._claim(generation):
                return
            call = self._take_call()
        self._record("fire", generation=generation)
        try:
            self._apply(*call)
        except Exception as exc:
            logger.exception("Debounced call to %s failed", self.name)
            self._record("error", error=repr(exc))

    def _take_call(self) -> tuple[Any, tuple[Any, ...], dict[str, Any]]:
        call = self._pending_call
        self._pending_call = None
        assert call is not None
        return call

    def cancel(self) -> bool:
        """Drop the pending invocation.

        Returns:
            True if an invocation was pending
        """
        with self._lock:
            cancelled = self._cancel_pending()
            self._pending_call = None
        if cancelled:
            self._record("cancel")
        return cancelled

    def flush(self) -> R | None:
        """Run the pending invocation now instead of waiting.

        Errors raised by the wrapped function propagate to the caller.

        Returns:
            The wrapped function's result, or None if nothing was pending
        """
        with self._lock:
            if not self._cancel_pending():
                return None
            call = self._take_call()
        self._record("fire", flushed=True)
        return self._apply(*call)


def debounce(func: Callable[..., R], delay: float, *, env: Env | None = None) -> Debounced[R]:
    """Delay ``func`` until ``delay`` seconds pass without another call.

    Args:
        func: The function to debounce
        delay: Quiet period in seconds
        env: Optional environment with scheduler and trace

    Returns:
        A Debounced wrapper; calling it returns None

    Example:
        >>> save = debounce(write_draft, 0.5)
        >>> save("a"); save("ab"); save("abc")  # write_draft("abc") once, 0.5s later
    """
    return Debounced(func, delay, env)
