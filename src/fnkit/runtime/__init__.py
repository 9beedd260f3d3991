"""Runtime layer - concrete schedulers."""

from fnkit.runtime.scheduler import AsyncioScheduler, ThreadingScheduler, default_scheduler

__all__ = [
    "AsyncioScheduler",
    "ThreadingScheduler",
    "default_scheduler",
]
