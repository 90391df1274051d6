"""Event log — queryable, thread-safe event store.

Stores a bounded ring buffer of ``ExportEvent`` objects for inspection.
Supports querying by event type and entity kind.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  The generator itself
    is single-threaded, but one log may be shared by several generators.

"""

import threading
from collections import deque
from typing import Any

from wxr.observability.events import ExportEvent


class EventLog:
    """Bounded event store with query support.

    Events are stored in a ring buffer (deque with maxlen).  When the
    buffer is full, the oldest events are discarded automatically.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[ExportEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ExportEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        kind: str | None = None,
        limit: int = 100,
    ) -> list[ExportEvent]:
        """Query events with optional filters.

        Args:
            event_type: Only return events of this type.
            kind: Only return events whose ``kind`` equals this value.
            limit: Maximum number of events to return.

        Returns:
            List of matching events, most recent first.

        """
        with self._lock:
            results: list[ExportEvent] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break
                if event_type is not None and not isinstance(event, event_type):
                    continue
                if kind is not None and getattr(event, "kind", None) != kind:
                    continue
                results.append(event)
            return results

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Return summary statistics about stored events."""
        with self._lock:
            events = list(self._events)

        type_counts: dict[str, int] = {}
        kind_counts: dict[str, int] = {}
        for event in events:
            name = type(event).__name__
            type_counts[name] = type_counts.get(name, 0) + 1
            kind = getattr(event, "kind", None)
            if kind is not None:
                kind_counts[kind] = kind_counts.get(kind, 0) + 1

        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": type_counts,
            "by_kind": kind_counts,
        }
