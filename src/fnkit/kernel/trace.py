"""Runtime trace infrastructure - separate from wrapper state.

This module provides evidence capture for debugging wrapper behavior:
which calls were scheduled, dropped, served from cache and so on.
Trace is runtime infrastructure - it never changes what a wrapper does.
"""

from __future__ import annotations

import contextvars
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """Evidence represents a single wrapper event captured at runtime."""

    action: str = ""
    id: int = field(default=0)
    parent_id: int | None = field(default=None)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = field(default=None)


class Trace:
    """Runtime trace context for capturing wrapper events.

    Uses stack-based nesting via push/pop for parent-child relationships.
    The stack is kept per context (thread or asyncio task), so nesting on
    one thread never parents events recorded on another. The event list is
    guarded by a lock because timer callbacks may run on scheduler threads.

    Performance guarantees:
    - Trace disabled → single flag check overhead
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: contextvars.ContextVar[tuple[int, ...]] = contextvars.ContextVar(
            f"fnkit_trace_stack_{id(self)}", default=()
        )
        self._lock = threading.Lock()

    def push(self, event_id: int) -> None:
        """Push an event onto the stack for nested tracing."""
        self._stack.set(self._stack.get() + (event_id,))

    def pop(self) -> int | None:
        """Pop the current stack frame.

        Returns:
            The event ID that was on top of stack, or None if stack is empty
        """
        stack = self._stack.get()
        if not stack:
            return None
        self._stack.set(stack[:-1])
        return stack[-1]

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an evidence event.

        Args:
            action: What happened (e.g., "debounce.schedule", "memoize.hit")
            info: Additional context
            parent_id: Explicit parent event ID for tree relationships
            duration_ms: Execution duration

        Returns:
            Event ID for linking child events, or None if tracing disabled
        """
        if not self.enabled:
            return None

        stack = self._stack.get()
        if parent_id is not None:
            effective_parent = parent_id
        elif stack:
            effective_parent = stack[-1]
        else:
            effective_parent = None

        with self._lock:
            event_id = self._next_id
            self._next_id += 1

            self._events.append(
                Evidence(
                    action=action,
                    id=event_id,
                    parent_id=effective_parent,
                    timestamp=datetime.now(UTC),
                    info=info or {},
                    duration_ms=duration_ms,
                )
            )

        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events."""
        with self._lock:
            return list(self._events)

    def actions(self) -> list[str]:
        """Get the recorded action names in order."""
        return [ev.action for ev in self.get_events()]

    def find_all(self, action: str) -> list[Evidence]:
        """Find all events with the given action."""
        return [ev for ev in self.get_events() if ev.action == action]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Reconstruct parent-child relationships for visualization.

        Returns:
            Dict mapping parent_id to list of child_ids
        """
        tree: dict[int | None, list[int]] = {}
        for ev in self.get_events():
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        with self._lock:
            self._events.clear()
            self._next_id = 0
        self._stack.set(())
