"""Function composition: pipe and compose."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from fnkit.kernel.errors import ArityError
from fnkit.kernel.wrapper import Bindable, call_with_receiver


class Pipeline(Bindable):
    """Threads a value through ``funcs`` in order.

    The first function receives the call's arguments; every later one
    receives the previous return value as its only argument. A bound
    receiver is passed to every function in the chain. With no functions
    the pipeline is the identity on a single argument.
    """

    def __init__(self, funcs: Sequence[Callable[..., Any]]) -> None:
        for index, func in enumerate(funcs):
            if not callable(func):
                raise TypeError(f"Pipeline step {index} is not callable: {func!r}")
        self.funcs: tuple[Callable[..., Any], ...] = tuple(funcs)

    def _invoke(self, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if not self.funcs:
            if len(args) != 1 or kwargs:
                raise ArityError("An empty pipeline takes exactly one positional argument")
            return args[0]

        first, *rest = self.funcs
        value = call_with_receiver(first, receiver, args, kwargs)
        for func in rest:
            value = call_with_receiver(func, receiver, (value,), {})
        return value

    def __len__(self) -> int:
        return len(self.funcs)

    def __repr__(self) -> str:
        names = ", ".join(getattr(f, "__name__", repr(f)) for f in self.funcs)
        return f"Pipeline({names})"


def pipe(*funcs: Callable[..., Any]) -> Pipeline:
    """Compose left-to-right: ``pipe(f, g)(x) == g(f(x))``."""
    return Pipeline(funcs)


def compose(*funcs: Callable[..., Any]) -> Pipeline:
    """Compose right-to-left: ``compose(f, g)(x) == f(g(x))``."""
    return Pipeline(funcs[::-1])
