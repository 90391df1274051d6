"""Shared type definitions for wxr."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import date

    from wxr.records import MetaField, TermRef

# Zero-argument source of entity ids
type IdGenerator = Callable[[], int]

# Zero-argument source of "now" for defaulted dates
type Clock = Callable[[], date]

# Category/tag/term association on an item
type TermEntry = TermRef | Mapping[str, Any]

# Key/value metadata pair on an item or author
type MetaEntry = MetaField | Mapping[str, Any]
