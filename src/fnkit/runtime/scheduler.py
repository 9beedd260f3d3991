"""Scheduler implementations for the deferred-execution port."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

from fnkit.kernel.ports import SchedulerPort

logger = logging.getLogger(__name__)


class ThreadingScheduler(SchedulerPort):
    """Runs each callback on its own daemon ``threading.Timer``."""

    def schedule(self, callback: Callable[[], None], delay: float) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled %r in %.3fs on %s", callback, delay, timer.name)
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class AsyncioScheduler(SchedulerPort):
    """Runs callbacks on an asyncio event loop via ``call_later``.

    Without an explicit loop, the loop running at schedule time is used.
    Scheduling from outside the loop's thread is not supported.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], None], delay: float) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


def default_scheduler() -> SchedulerPort:
    """Pick a scheduler for the current context.

    Returns:
        An AsyncioScheduler bound to the running loop, or a
        ThreadingScheduler when no event loop is running
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return ThreadingScheduler()
    return AsyncioScheduler(loop)
