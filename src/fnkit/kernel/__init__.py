"""Kernel layer - pure abstractions for fnkit."""

from fnkit.kernel.env import Env
from fnkit.kernel.errors import ArityError, SerializationError
from fnkit.kernel.ports import SchedulerPort
from fnkit.kernel.trace import Evidence, Trace
from fnkit.kernel.wrapper import Bindable, Bound, Wrapper, call_with_receiver

__all__ = [
    "Env",
    "Evidence",
    "Trace",
    # Errors
    "ArityError",
    "SerializationError",
    # Ports
    "SchedulerPort",
    # Wrappers
    "Bindable",
    "Bound",
    "Wrapper",
    "call_with_receiver",
]
