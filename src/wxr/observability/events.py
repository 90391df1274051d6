"""Event model for export observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityAppended:
    """An entity element was appended to the export channel.

    Attributes:
        kind: Entity kind (``post``, ``page``, ``attachment``, ``author``,
            ``tag``, ``category`` or ``term``).
        entity_id: Id written to the element.
        children: Number of child elements written (fields, terms, meta).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: str
    entity_id: object
    children: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class DocumentRendered:
    """The document was serialized to text.

    Attributes:
        pretty: Whether pretty printing was on.
        size_bytes: UTF-8 size of the rendered document.
        duration_ms: Time spent rendering.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    pretty: bool
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ExportWritten:
    """A rendered document was written to disk.

    Attributes:
        path: Output file path.
        size_bytes: Bytes written.
        duration_ms: Time spent rendering and writing.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


type ExportEvent = EntityAppended | DocumentRendered | ExportWritten


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
