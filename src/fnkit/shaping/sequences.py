"""Sequence alignment."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def zip(*sequences: Iterable[Any], fillvalue: Any = None) -> list[tuple[Any, ...]]:
    """Transpose sequences into tuples, padding to the longest one.

    Unlike the builtin, nothing is truncated: positions past the end of a
    shorter sequence hold ``fillvalue``.

    Example:
        >>> zip([1, 2, 3], [4, 5])
        [(1, 4), (2, 5), (3, None)]
    """
    columns = [list(seq) for seq in sequences]
    length = max((len(col) for col in columns), default=0)
    return [
        tuple(col[i] if i < len(col) else fillvalue for col in columns)
        for i in range(length)
    ]
