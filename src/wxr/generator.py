"""WXR generator — assemble a WordPress export document in memory.

A :class:`WxrGenerator` owns one ``<rss>`` tree.  Construction writes the
channel header from a :class:`~wxr.config.SiteConfig`; each ``add_*`` call
appends exactly one element to the channel, in call order; ``stringify()``
renders the tree.  The tree is append-only.

Example::

    gen = WxrGenerator(name="Blog", url="https://example.com")
    gen.add_user(username="alice", email="alice@example.com")
    gen.add_category(slug="js", name="JS")
    gen.add_post(title="Hello", slug="hello", author="alice",
                 categories=[{"slug": "js", "name": "JS"}])
    xml = gen.stringify(pretty=True)

"""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from wxr._errors import ConfigError, ExportError
from wxr._tree import Node, render
from wxr.config import RenderConfig, SiteConfig
from wxr.dates import format_date
from wxr.ids import random_id
from wxr.records import CommentStatus, as_term, iter_meta

if TYPE_CHECKING:
    from wxr._types import Clock, IdGenerator, MetaEntry, TermEntry
    from wxr.observability.collector import ExportCollector

WXR_VERSION = 1.2
GENERATOR = "https://pypi.org/project/wxr-generator/"

# Category-family vocabulary, keyed by whether the taxonomy is "category"
_CATEGORY_TAGS = {
    "element": "wp:category",
    "slug": "wp:category_nicename",
    "name": "wp:cat_name",
    "description": "wp:category_description",
    "parent": "wp:category_parent",
}
_TERM_TAGS = {
    "element": "wp:term",
    "slug": "wp:term_slug",
    "name": "wp:term_name",
    "description": "wp:term_description",
    "parent": "wp:term_parent",
}


@dataclass(frozen=True, slots=True)
class ExportSummary:
    """Record of a document written by :meth:`WxrGenerator.write`.

    Attributes:
        output_path: Path of the written file.
        size_bytes: Size of the written file in bytes.
        entities: Number of entity elements in the channel.
        duration_ms: Time taken to render and write.

    """

    output_path: Path
    size_bytes: int
    entities: int
    duration_ms: float


class WxrGenerator:
    """Builds a WXR 1.2 export document.

    Args:
        site: Site metadata, as a :class:`SiteConfig` or a mapping.  When
            omitted, ``site_fields`` are used to build one.
        ids: Source of ids for entities added without one.
        clock: Source of the current time for defaulted dates.
        collector: Optional observability collector.
        **site_fields: ``name``, ``url``, ``description``, ``language``,
            ``base_site_url``, ``base_blog_url``.

    Raises:
        ConfigError: If the site configuration is incomplete, or holds a value
            the markup engine rejects.

    """

    def __init__(
        self,
        site: SiteConfig | Mapping[str, Any] | None = None,
        *,
        ids: IdGenerator | None = None,
        clock: Clock | None = None,
        collector: ExportCollector | None = None,
        **site_fields: Any,
    ) -> None:
        if site is not None and site_fields:
            msg = "Pass either a site config or site fields, not both"
            raise ConfigError(msg)
        if site is None:
            site = SiteConfig.from_mapping(site_fields)
        elif not isinstance(site, SiteConfig):
            site = SiteConfig.from_mapping(dict(site))

        self._site = site
        self._ids = ids or random_id
        self._clock = clock or datetime.now
        self._collector = collector
        self._counts: Counter[str] = Counter()

        self._root = Node.root("rss", version="2.0")
        self._channel = self._root.child("channel")
        try:
            self._channel.child("wp:wxr_version", WXR_VERSION)
            self._channel.child("title", site.name)
            self._channel.child("link", site.url)
            self._channel.child("description", site.description)
            self._channel.child("language", site.language)
            self._channel.child("wp:base_site_url", site.base_site_url)
            self._channel.child("wp:base_blog_url", site.base_blog_url)
            self._channel.child("generator", GENERATOR)
        except (ValueError, TypeError) as exc:
            msg = f"Invalid site configuration: {exc}"
            raise ConfigError(msg) from exc

    @property
    def site(self) -> SiteConfig:
        """The site configuration written to the channel header."""
        return self._site

    @property
    def counts(self) -> dict[str, int]:
        """Number of entities appended so far, by kind."""
        return dict(self._counts)

    def __len__(self) -> int:
        return sum(self._counts.values())

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_post(
        self,
        *,
        slug: Any = None,
        title: Any = None,
        author: Any = None,
        url: Any = None,
        content: Any = "",
        summary: Any = "",
        id: int | None = None,  # noqa: A002
        date: Any = None,
        comment_status: str = CommentStatus.OPEN,
        ping_status: str = CommentStatus.OPEN,
        status: str = "publish",
        type: str = "post",  # noqa: A002
        password: str = "",
        categories: Iterable[TermEntry] = (),
        tags: Iterable[TermEntry] = (),
        terms: Iterable[TermEntry] = (),
        image: Any = False,
        meta: Iterable[MetaEntry] | Mapping[str, Any] = (),
    ) -> int:
        """Append a post (or any item sharing the post field set).

        Term associations are written in ``terms``, ``categories``, ``tags``
        order.  A truthy ``image`` adds a ``_thumbnail_id`` meta pair ahead
        of ``meta``.

        Returns:
            The post id written.

        """
        if id is None:
            id = self._ids()  # noqa: A001
        post_date = format_date(self._clock() if date is None else date)

        with self._entity("item") as post:
            post.child("title", title)
            post.child("link", url)
            post.child("pubDate", post_date)
            post.cdata_child("dc:creator", author)
            post.child("guid", slug, isPermaLink=True)
            post.cdata_child("description", summary)
            post.cdata_child("content:encoded", content)
            post.cdata_child("excerpt:encoded", summary)
            post.child("wp:post_id", id)
            post.cdata_child("wp:post_date", post_date)
            post.cdata_child("wp:post_date_gmt", post_date)
            post.cdata_child("wp:comment_status", comment_status)
            post.cdata_child("wp:ping_status", ping_status)
            post.cdata_child("wp:post_name", slug)
            post.cdata_child("wp:status", status)
            post.child("wp:post_parent", 0)
            post.child("wp:menu_order", 0)
            post.cdata_child("wp:post_type", type)
            post.cdata_child("wp:post_password", password)
            post.child("wp:is_sticky", 0)

            for entry in [*(terms or ()), *(categories or ()), *(tags or ())]:
                term = as_term(entry)
                post.cdata_child(
                    "category",
                    term.name,
                    domain=term.domain or "category",
                    nicename=term.slug,
                )

            if image:
                post.meta_pair("wp:postmeta", "_thumbnail_id", image)
            for field in iter_meta(meta):
                post.meta_pair("wp:postmeta", field.key, field.value)

        self._appended(type, id, post)
        return id

    def add_page(self, **fields: Any) -> int:
        """Append a page: :meth:`add_post` with ``type`` forced to ``page``."""
        fields["type"] = "page"
        return self.add_post(**fields)

    def add_attachment(
        self,
        *,
        id: int | None = None,  # noqa: A002
        url: Any = None,
        date: Any = None,
        file: Any = None,
        title: Any = None,
        author: Any = None,
        description: Any = "",
        caption: Any = "",
        post_id: Any = None,
        comment_status: str | None = CommentStatus.CLOSED,
        ping_status: str | None = CommentStatus.CLOSED,
        meta_data: Any = None,
        meta: Iterable[MetaEntry] | Mapping[str, Any] = (),
    ) -> int:
        """Append a media attachment item.

        ``post_id`` is the parent item.  ``file`` (relative upload path),
        ``meta_data`` (serialized attachment metadata) and ``title`` (alt
        text) each add a meta pair after ``meta`` when truthy.  A falsy
        ``comment_status`` becomes ``open``; a falsy ``ping_status`` becomes
        ``closed``.

        Returns:
            The attachment id written.

        """
        if id is None:
            id = self._ids()  # noqa: A001
        author = author or "admin"
        comment_status = comment_status or CommentStatus.OPEN
        ping_status = ping_status or CommentStatus.CLOSED
        post_date = format_date(self._clock() if date is None else date)

        with self._entity("item") as attach:
            attach.child("title", title)
            attach.child("link", url)
            attach.child("pubDate", post_date)
            attach.cdata_child("dc:creator", author)
            attach.cdata_child("description", description)
            attach.cdata_child("content:encoded", description)
            attach.cdata_child("excerpt:encoded", caption)
            attach.child("wp:post_id", id)
            attach.cdata_child("wp:post_date", post_date)
            attach.cdata_child("wp:comment_status", comment_status)
            attach.cdata_child("wp:ping_status", ping_status)
            attach.cdata_child("wp:post_name", title)
            attach.cdata_child("wp:status", "inherit")
            attach.child("wp:post_parent", post_id)
            attach.child("wp:menu_order", 0)
            attach.child("wp:post_type", "attachment")
            attach.cdata_child("wp:post_password", "")
            attach.child("wp:is_sticky", 0)
            attach.cdata_child("wp:attachment_url", url)

            for field in iter_meta(meta):
                attach.meta_pair("wp:postmeta", field.key, field.value)
            if file:
                attach.meta_pair("wp:postmeta", "_wp_attached_file", file)
            if meta_data:
                attach.meta_pair("wp:postmeta", "_wp_attachment_metadata", meta_data)
            if title:
                attach.meta_pair("wp:postmeta", "_wp_attachment_image_alt", title)

        self._appended("attachment", id, attach)
        return id

    def add_comment(self, **fields: Any) -> None:
        """Accept a comment record.  Comments are not exported; nothing is appended."""

    # ------------------------------------------------------------------
    # Authors and taxonomies
    # ------------------------------------------------------------------

    def add_user(
        self,
        *,
        id: int | None = None,  # noqa: A002
        username: Any = None,
        email: Any = None,
        display_name: Any = None,
        first_name: Any = "",
        last_name: Any = "",
        meta: Iterable[MetaEntry] | Mapping[str, Any] = (),
    ) -> int:
        """Append an author.  ``display_name`` falls back to ``username``.

        Returns:
            The author id written.

        """
        if id is None:
            id = self._ids()  # noqa: A001

        with self._entity("wp:author") as user:
            user.child("wp:author_id", id)
            user.child("wp:author_login", username)
            user.child("wp:author_email", email)
            user.child("wp:author_display_name", display_name or username)
            user.child("wp:author_first_name", first_name)
            user.child("wp:author_last_name", last_name)
            for field in iter_meta(meta):
                user.meta_pair("wp:usermeta", field.key, field.value)

        self._appended("author", id, user)
        return id

    def add_tag(
        self,
        *,
        id: int | None = None,  # noqa: A002
        slug: Any = None,
        name: Any = None,
        description: Any = "",
    ) -> int:
        """Append a tag.  A missing or zero ``id`` is generated.

        Returns:
            The term id written.

        """
        if not id:
            id = self._ids()  # noqa: A001

        with self._entity("wp:tag") as tag:
            tag.child("wp:term_id", id)
            tag.child("wp:tag_slug", slug)
            tag.child("wp:tag_name", name)
            tag.child("wp:tag_description", description)

        self._appended("tag", id, tag)
        return id

    def add_category(
        self,
        *,
        id: int | None = None,  # noqa: A002
        slug: Any = None,
        name: Any = None,
        parent_id: Any = 0,
        description: Any = "",
        term_type: str = "category",
        termType: str | None = None,  # noqa: N803
    ) -> int:
        """Append a category, or a term of a custom taxonomy.

        The ``category`` taxonomy uses the ``wp:category`` vocabulary; any
        other ``term_type`` uses ``wp:term`` and adds ``wp:term_taxonomy``.
        A zero ``parent_id`` means top level and writes no parent element.

        Returns:
            The term id written.

        """
        if termType is not None:
            term_type = termType
        if id is None:
            id = self._ids()  # noqa: A001
        is_category = term_type == "category"
        vocab = _CATEGORY_TAGS if is_category else _TERM_TAGS

        with self._entity(vocab["element"]) as term:
            term.child("wp:term_id", id)
            term.cdata_child(vocab["slug"], slug)
            term.cdata_child(vocab["name"], name)
            term.cdata_child(vocab["description"], description)
            if not is_category:
                term.cdata_child("wp:term_taxonomy", term_type)
            if parent_id:
                term.child(vocab["parent"], parent_id)

        self._appended("category" if is_category else "term", id, term)
        return id

    # camelCase names kept for parity with the JavaScript-style interface
    addPost = add_post  # noqa: N815
    addPage = add_page  # noqa: N815
    addAttachment = add_attachment  # noqa: N815
    addComment = add_comment  # noqa: N815
    addUser = add_user  # noqa: N815
    addTag = add_tag  # noqa: N815
    addCategory = add_category  # noqa: N815

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def stringify(self, config: RenderConfig | Mapping[str, Any] | None = None, **overrides: Any) -> str:
        """Render the document to an XML string.

        Args:
            config: Rendering options, as a :class:`RenderConfig` or mapping.
            **overrides: Individual options (``pretty``, ``indent``,
                ``newline``); these win over ``config``.

        Returns:
            The complete document, starting with the XML declaration.

        """
        options = RenderConfig().merged(config, **overrides)
        t0 = time.perf_counter()
        xml = render(self._root, options)
        if self._collector is not None:
            self._collector.record_render(
                pretty=options.pretty,
                size_bytes=len(xml.encode("utf-8")),
                duration_ms=(time.perf_counter() - t0) * 1000,
            )
        return xml

    def write(
        self,
        path: str | Path,
        config: RenderConfig | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ExportSummary:
        """Render the document and write it to ``path`` as UTF-8.

        Raises:
            ExportError: If the file cannot be written.

        """
        output_path = Path(path)
        t0 = time.perf_counter()
        data = self.stringify(config, **overrides).encode("utf-8")
        try:
            output_path.write_bytes(data)
        except OSError as exc:
            msg = f"Cannot write export to {output_path}: {exc}"
            raise ExportError(msg) from exc
        elapsed = (time.perf_counter() - t0) * 1000

        if self._collector is not None:
            self._collector.record_write(str(output_path), size_bytes=len(data), duration_ms=elapsed)
        return ExportSummary(
            output_path=output_path,
            size_bytes=len(data),
            entities=len(self),
            duration_ms=elapsed,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _entity(self, tag: str) -> Iterator[Node]:
        """Append ``tag`` to the channel, removing it again if filling it fails."""
        node = self._channel.child(tag)
        try:
            yield node
        except BaseException as exc:
            node.detach()
            if isinstance(exc, (ValueError, TypeError)):
                msg = f"Cannot write <{tag}>: {exc}"
                raise ExportError(msg) from exc
            raise

    def _appended(self, kind: str, entity_id: object, node: Node) -> None:
        self._counts[kind] += 1
        if self._collector is not None:
            self._collector.record_append(kind, entity_id, children=len(node))
