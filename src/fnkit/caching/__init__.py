"""Result caching."""

from .keys import argument_key
from .memoize import Memoized, memoize

__all__ = [
    "Memoized",
    "argument_key",
    "memoize",
]
