"""Export collector — records generator activity into an event log."""

from __future__ import annotations

from wxr.observability.events import (
    DocumentRendered,
    EntityAppended,
    ExportWritten,
    now_ns,
)
from wxr.observability.log import EventLog


class ExportCollector:
    """Event collector passed to :class:`~wxr.generator.WxrGenerator`.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_append(self, kind: str, entity_id: object, *, children: int = 0) -> None:
        """Record an entity appended to the channel."""
        self._log.append(
            EntityAppended(
                kind=kind,
                entity_id=entity_id,
                children=children,
                timestamp_ns=now_ns(),
            )
        )

    def record_render(self, *, pretty: bool, size_bytes: int, duration_ms: float = 0.0) -> None:
        """Record a document render."""
        self._log.append(
            DocumentRendered(
                pretty=pretty,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_write(self, path: str, *, size_bytes: int, duration_ms: float = 0.0) -> None:
        """Record a document written to disk."""
        self._log.append(
            ExportWritten(
                path=path,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
