"""Object shaping: pick, omit, zip."""

from .mappings import omit, own_items, pick
from .sequences import zip

__all__ = [
    "omit",
    "own_items",
    "pick",
    "zip",
]
