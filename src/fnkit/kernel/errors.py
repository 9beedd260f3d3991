"""Error types raised by fnkit wrappers."""

from __future__ import annotations


class SerializationError(ValueError):
    """Error raised when call arguments cannot be turned into a cache key.

    This error preserves the raw arguments for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"SerializationError({super().__repr__()}, raw_value={self.raw_value!r})"


class ArityError(TypeError):
    """Error raised when a callable is given an unusable number of arguments."""
