"""Unbounded memoization keyed by serialized arguments."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from fnkit.caching.keys import argument_key
from fnkit.kernel.env import Env
from fnkit.kernel.wrapper import Wrapper

R = TypeVar("R")

KeyFunc = Callable[..., Hashable]


class Memoized(Wrapper[R]):
    """Caches results per distinct argument key for the wrapper's lifetime.

    The cache never evicts. Errors raised by the wrapped function are not
    cached. The receiver of a bound call is not part of the key.
    """

    kind = "memoize"

    def __init__(self, func: Callable[..., R], key: KeyFunc | None = None, env: Env | None = None) -> None:
        super().__init__(func, env)
        self._key = key
        self._cache: dict[Hashable, R] = {}

    @property
    def cache(self) -> Mapping[Hashable, R]:
        """Read-only view of the cache."""
        return MappingProxyType(self._cache)

    def cache_clear(self) -> None:
        """Drop every cached result."""
        with self._lock:
            self._cache.clear()

    def _make_key(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
        if self._key is not None:
            return self._key(*args, **kwargs)
        return argument_key(args, kwargs)

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> R:
        key = self._make_key(args, kwargs)
        with self._lock:
            if key in self._cache:
                self._record("hit", key=key)
                return self._cache[key]

            trace = self.env.trace
            event_id = self._record("miss", key=key)
            if trace is not None and event_id is not None:
                trace.push(event_id)
            try:
                result = self._apply(receiver, args, kwargs)
            finally:
                if trace is not None and event_id is not None:
                    trace.pop()
            self._cache[key] = result
            return result


def memoize(func: Callable[..., R], *, key: KeyFunc | None = None, env: Env | None = None) -> Memoized[R]:
    """Cache ``func`` results by argument.

    Args:
        func: The function to memoize
        key: Optional key function called with the same arguments;
            defaults to JSON serialization of the arguments
        env: Optional environment with trace

    Returns:
        A Memoized wrapper

    Raises:
        SerializationError: At call time, if the default key cannot
            serialize the arguments
    """
    return Memoized(func, key, env)
