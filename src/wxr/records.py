"""Value types for the nested entries carried by items and authors.

Add-calls accept either these dataclasses or plain mappings with the same
keys, so records loaded from YAML/JSON can be passed straight through::

    gen.add_post(title="Hi", tags=[{"slug": "js", "name": "JS"}])
    gen.add_post(title="Hi", tags=[TermRef(slug="js", name="JS")])

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wxr._types import MetaEntry, TermEntry


class CommentStatus(StrEnum):
    """Comment and ping policy of an item."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class TermRef:
    """A category, tag, or custom-taxonomy term attached to an item.

    Attributes:
        slug: URL-safe term name, written as the ``nicename`` attribute.
        name: Display name, written as the element text.
        domain: Taxonomy the term belongs to (``category``, ``post_tag``, ...).

    """

    slug: Any = None
    name: Any = None
    domain: str = "category"


@dataclass(frozen=True, slots=True)
class MetaField:
    """An opaque key/value metadata pair."""

    key: Any
    value: Any = None


def as_term(entry: TermEntry) -> TermRef:
    """Normalize a term entry to a :class:`TermRef`.

    A missing or empty ``domain`` falls back to ``"category"``.

    Raises:
        TypeError: If ``entry`` is neither a TermRef nor a mapping.

    """
    if isinstance(entry, TermRef):
        return entry
    if not isinstance(entry, Mapping):
        msg = f"term entry must be a TermRef or a mapping, not {type(entry).__name__}: {entry!r}"
        raise TypeError(msg)
    return TermRef(
        slug=entry.get("slug"),
        name=entry.get("name"),
        domain=entry.get("domain") or "category",
    )


def as_meta(entry: MetaEntry) -> MetaField:
    """Normalize a metadata entry to a :class:`MetaField`."""
    if isinstance(entry, MetaField):
        return entry
    if not isinstance(entry, Mapping):
        msg = f"meta entry must be a MetaField or a mapping, not {type(entry).__name__}: {entry!r}"
        raise TypeError(msg)
    return MetaField(key=entry.get("key"), value=entry.get("value"))


def iter_meta(meta: Iterable[MetaEntry] | Mapping[str, Any] | None) -> list[MetaField]:
    """Expand ``meta`` into ordered pairs.

    Accepts a sequence of entries or a plain ``{key: value}`` mapping
    (insertion order is kept).
    """
    if not meta:
        return []
    if isinstance(meta, Mapping):
        return [MetaField(key=k, value=v) for k, v in meta.items()]
    return [as_meta(entry) for entry in meta]
