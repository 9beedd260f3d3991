"""Port protocols for fnkit - pure abstractions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class SchedulerPort(Protocol):
    """Deferred-execution port.

    Callbacks run once, after at least ``delay`` seconds, and never
    preempt the code that scheduled them.
    """

    def schedule(self, callback: Callable[[], None], delay: float) -> Any:
        """Schedule ``callback`` and return an opaque handle for ``cancel``."""
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a scheduled callback. Cancelling a fired handle is a no-op."""
        ...
