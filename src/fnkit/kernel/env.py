"""Environment for fnkit wrappers - default implementations."""

from __future__ import annotations

from dataclasses import dataclass

from fnkit.kernel.ports import SchedulerPort
from fnkit.kernel.trace import Trace


@dataclass(frozen=True)
class Env:
    """Environment aggregation - combines the ports a wrapper may use.

    A missing scheduler is resolved when a timer is first needed, so a
    wrapper built at import time still picks up an event loop that is
    running when it is called.
    """

    scheduler: SchedulerPort | None = None
    trace: Trace | None = None
