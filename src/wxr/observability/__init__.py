"""Export observability — a record of what the generator did.

Quick Start:
    >>> from wxr import WxrGenerator
    >>> from wxr.observability import ExportCollector
    >>> collector = ExportCollector()
    >>> gen = WxrGenerator(url="https://example.com", collector=collector)
    >>> gen.add_post(title="Hello")
    >>> collector.log.stats()["by_kind"]
    {'post': 1}

"""

from wxr.observability.collector import ExportCollector
from wxr.observability.events import (
    DocumentRendered,
    EntityAppended,
    ExportEvent,
    ExportWritten,
    now_ns,
)
from wxr.observability.log import EventLog

__all__ = [
    "DocumentRendered",
    "EntityAppended",
    "EventLog",
    "ExportCollector",
    "ExportEvent",
    "ExportWritten",
    "now_ns",
]
