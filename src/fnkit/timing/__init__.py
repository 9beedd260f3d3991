"""Timing control wrappers: debounce, throttle, once."""

from .debounce import Debounced, debounce
from .once import Once, once
from .throttle import Throttled, throttle

__all__ = [
    "Debounced",
    "Once",
    "Throttled",
    "debounce",
    "once",
    "throttle",
]
