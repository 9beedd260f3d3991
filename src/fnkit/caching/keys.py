"""Cache key derivation for memoized calls."""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from fnkit.kernel.errors import SerializationError


def argument_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Serialize call arguments into a cache key.

    Positional order matters and keyword order does not. Values that
    serialize to the same JSON share a key, so ``(1, 2)`` and ``[1, 2]``
    collide while ``1`` and ``"1"`` do not. Bytes are encoded as base64
    text, so arbitrary binary data is accepted.

    Args:
        args: Positional arguments of the call
        kwargs: Keyword arguments of the call

    Returns:
        The JSON text of the arguments

    Raises:
        SerializationError: If an argument is cyclic or has no JSON form
    """
    payload = {"args": list(args), "kwargs": dict(sorted(kwargs.items()))}
    try:
        return to_json(payload, bytes_mode="base64").decode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError, RecursionError) as e:
        raise SerializationError(f"Cannot derive cache key: {e}", (args, kwargs)) from e
