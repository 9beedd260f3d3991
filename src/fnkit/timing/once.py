"""Run-once wrapper."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, TypeVar

from fnkit.kernel.env import Env
from fnkit.kernel.wrapper import Wrapper

R = TypeVar("R")


class Once(Wrapper[R]):
    """Invokes the wrapped function on the first call only.

    Later calls return the first result whatever their arguments. A first
    call that raises does not count: the error propagates and the next call
    tries again.
    """

    kind = "once"

    def __init__(self, func: Callable[..., R], env: Env | None = None) -> None:
        super().__init__(func, env)
        self._called = False
        self._result: R | None = None

    @property
    def called(self) -> bool:
        """Whether the wrapped function has completed successfully."""
        with self._lock:
            return self._called

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> R:
        with self._lock:
            if self._called:
                self._record("cached")
                return self._result  # type: ignore[return-value]

            start_time = time.perf_counter()
            result = self._apply(receiver, args, kwargs)
            self._result = result
            self._called = True
            self._record("invoke", duration_ms=(time.perf_counter() - start_time) * 1000)
            return result


def once(func: Callable[..., R], *, env: Env | None = None) -> Once[R]:
    """Wrap ``func`` so its side effects happen at most once.

    Example:
        >>> init = once(connect)
        >>> init() is init()
        True
    """
    return Once(func, env)
