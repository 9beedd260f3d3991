from .caching import Memoized, memoize
from .combinators import Pipeline, compose, curry, partial, pipe
from .kernel import ArityError, Env, Evidence, SchedulerPort, SerializationError, Trace
from .runtime import AsyncioScheduler, ThreadingScheduler, default_scheduler
from .shaping import omit, pick, zip
from .timing import Debounced, Once, Throttled, debounce, once, throttle

__all__ = [
    # Timing
    "debounce",
    "throttle",
    "once",
    "Debounced",
    "Throttled",
    "Once",
    # Caching
    "memoize",
    "Memoized",
    # Combinators
    "curry",
    "partial",
    "pipe",
    "compose",
    "Pipeline",
    # Shaping
    "pick",
    "omit",
    "zip",
    # Environment
    "Env",
    "Trace",
    "Evidence",
    "SchedulerPort",
    "AsyncioScheduler",
    "ThreadingScheduler",
    "default_scheduler",
    # Errors
    "ArityError",
    "SerializationError",
]
