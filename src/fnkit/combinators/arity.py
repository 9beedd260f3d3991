"""Arity transformers: curry and partial."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from fnkit.kernel.errors import ArityError

R = TypeVar("R")


def required_arity(func: Callable[..., Any]) -> int:
    """Count the positional parameters of ``func`` that have no default.

    Raises:
        ArityError: If the signature of ``func`` cannot be inspected
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise ArityError(f"Cannot infer arity of {func!r}; pass arity explicitly") from e
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in positional and param.default is inspect.Parameter.empty
    )


def _drop_positional(signature: inspect.Signature, count: int) -> inspect.Signature:
    """Remove the first ``count`` positional parameters from ``signature``."""
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    params = []
    for param in signature.parameters.values():
        if count and param.kind in positional:
            count -= 1
            continue
        params.append(param)
    return signature.replace(parameters=params)


def curry(func: Callable[..., R], arity: int | None = None) -> Callable[..., Any]:
    """Collect positional arguments across calls until ``arity`` is reached.

    Each call with too few arguments returns a new function closing over
    everything collected so far; the chain can be branched safely. Keyword
    arguments are collected too but never count towards the arity.

    Args:
        func: The function to curry
        arity: Number of positional arguments to wait for; defaults to
            the required positional parameters of ``func``

    Returns:
        The curried function

    Example:
        >>> add = curry(lambda a, b, c: a + b + c)
        >>> add(1)(2)(3) == add(1, 2)(3) == add(1, 2, 3) == 6
        True
    """
    if not callable(func):
        raise TypeError(f"curry expects a callable, got {type(func).__name__}")
    if arity is None:
        arity = required_arity(func)
    if arity < 0:
        raise ArityError(f"arity must be non-negative, got {arity}")

    try:
        signature: inspect.Signature | None = inspect.signature(func)
    except (TypeError, ValueError):
        signature = None

    @functools.wraps(func)
    def curried(*args: Any, **kwargs: Any) -> Any:
        if len(args) >= arity:
            return func(*args, **kwargs)

        def more(*more_args: Any, **more_kwargs: Any) -> Any:
            return curried(*args, *more_args, **{**kwargs, **more_kwargs})

        more.__name__ = getattr(func, "__name__", "more")
        more.__qualname__ = getattr(func, "__qualname__", more.__name__)
        more.__doc__ = getattr(func, "__doc__", None)
        if signature is not None:
            more.__signature__ = _drop_positional(signature, len(args))  # type: ignore[attr-defined]
        return more

    return curried


def partial(func: Callable[..., R], *args: Any, **kwargs: Any) -> Callable[..., R]:
    """Pre-bind leading arguments; every call invokes ``func`` immediately.

    Unlike ``curry`` there is no chain: missing arguments surface as the
    usual ``TypeError`` from ``func``. Later keyword arguments override
    bound ones.
    """
    if not callable(func):
        raise TypeError(f"partial expects a callable, got {type(func).__name__}")
    return functools.partial(func, *args, **kwargs)
