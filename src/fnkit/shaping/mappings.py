"""Mapping projections: pick and omit."""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable, Mapping
from typing import Any


def own_items(obj: Any) -> Iterable[tuple[Any, Any]]:
    """Entries that belong to ``obj`` itself.

    For a mapping these are its items. For any other object they are its
    instance attributes; class attributes are inherited and excluded.
    Objects without an instance ``__dict__`` have no own entries.
    """
    if isinstance(obj, Mapping):
        return obj.items()
    try:
        return vars(obj).items()
    except TypeError:
        return ()


def _key_lookup(keys: Iterable[Any]) -> Collection[Any]:
    if isinstance(keys, (str, bytes)):
        return (keys,)
    keys = tuple(keys)
    if all(isinstance(key, Hashable) for key in keys):
        try:
            return frozenset(keys)
        except TypeError:
            # tuples holding unhashable members pass the Hashable check
            pass
    return keys


def pick(obj: Any, keys: Iterable[Any]) -> dict[Any, Any]:
    """Copy the own entries of ``obj`` whose key is in ``keys``.

    Missing keys are skipped. The result follows the order of ``obj`` and
    holds the same value objects (shallow copy).

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["c", "a"])
        {'a': 1, 'c': 3}
    """
    wanted = _key_lookup(keys)
    return {key: value for key, value in own_items(obj) if key in wanted}


def omit(obj: Any, keys: Iterable[Any]) -> dict[Any, Any]:
    """Copy the own entries of ``obj`` whose key is not in ``keys``.

    Example:
        >>> omit({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'b': 2}
    """
    unwanted = _key_lookup(keys)
    return {key: value for key, value in own_items(obj) if key not in unwanted}
