"""Wrapper base classes - receiver binding and trace recording."""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from fnkit.kernel.env import Env

R = TypeVar("R")


class Bindable:
    """A callable object that binds a receiver like a plain function does.

    Stored as a class attribute and looked up through an instance, it
    returns a ``Bound`` view that passes the instance as the receiver.
    Called directly, there is no receiver.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._invoke(None, args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return Bound(self, instance)

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        raise NotImplementedError


_FORWARDED = ("__module__", "__name__", "__qualname__", "__doc__", "__wrapped__")


@dataclass(frozen=True)
class Bound:
    """A ``Bindable`` bound to a receiver.

    Attribute access falls through to the wrapper, so ``obj.method.cancel()``
    reaches the shared wrapper state.
    """

    wrapper: Bindable
    receiver: Any

    def __post_init__(self) -> None:
        for attr in _FORWARDED:
            try:
                value = getattr(self.wrapper, attr)
            except AttributeError:
                continue
            object.__setattr__(self, attr, value)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.wrapper._invoke(self.receiver, args, kwargs)

    def __getattr__(self, name: str) -> Any:
        if name in ("wrapper", "receiver") or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.wrapper, name)


def call_with_receiver(
    func: Callable[..., R],
    receiver: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> R:
    """Call ``func``, passing ``receiver`` first when there is one."""
    if receiver is None:
        return func(*args, **kwargs)
    return func(receiver, *args, **kwargs)


class Wrapper(Bindable, Generic[R]):
    """Base for stateful wrappers around a single function.

    Subclasses set ``kind`` (used as the trace action prefix) and implement
    ``_invoke``. Mutable state is guarded by ``self._lock``.
    """

    kind: ClassVar[str] = "wrapper"

    def __init__(self, func: Callable[..., R], env: Env | None = None) -> None:
        if not callable(func):
            raise TypeError(f"{self.kind} expects a callable, got {type(func).__name__}")
        # Metadata only: the function's __dict__ would shadow wrapper state.
        functools.update_wrapper(self, func, updated=())
        self.func = func
        self.env = env if env is not None else Env()
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return getattr(self.func, "__qualname__", None) or repr(self.func)

    def _apply(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> R:
        return call_with_receiver(self.func, receiver, args, kwargs)

    def _record(
        self,
        action: str,
        duration_ms: float | None = None,
        **info: Any,
    ) -> int | None:
        trace = self.env.trace
        if trace is None:
            return None
        return trace.record(f"{self.kind}.{action}", info=info, duration_ms=duration_ms)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
