"""Tests for wxr._tree — element handle and rendering."""

from __future__ import annotations

import pytest
from lxml import etree

from wxr._tree import NAMESPACES, XML_DECLARATION, Node, qualify, render, to_text
from wxr.config import RenderConfig


class TestQualify:
    """qualify — prefix:name to {uri}name."""

    def test_prefixed(self) -> None:
        assert qualify("wp:post_id") == "{http://wordpress.org/export/1.2/}post_id"

    def test_unprefixed(self) -> None:
        assert qualify("item") == "item"

    def test_unknown_prefix(self) -> None:
        with pytest.raises(KeyError):
            qualify("nope:thing")


class TestToText:
    """to_text — value to element text."""

    def test_none(self) -> None:
        assert to_text(None) == ""

    def test_bool(self) -> None:
        assert to_text(True) == "true"
        assert to_text(False) == "false"

    def test_numbers(self) -> None:
        assert to_text(0) == "0"
        assert to_text(1.2) == "1.2"


class TestNode:
    """Node — child construction."""

    def test_root_declares_namespaces(self) -> None:
        root = Node.root("rss", version="2.0")
        assert root.element.nsmap == NAMESPACES
        assert root.element.get("version") == "2.0"

    def test_child_text_and_attrs(self) -> None:
        root = Node.root("rss")
        child = root.child("guid", "slug", isPermaLink=True)
        assert child.element.text == "slug"
        assert child.element.get("isPermaLink") == "true"

    def test_child_none_text_is_empty(self) -> None:
        root = Node.root("rss")
        root.child("title", None)
        assert etree.tostring(root.element, encoding="unicode").endswith("<title/></rss>")

    def test_cdata_child(self) -> None:
        root = Node.root("rss")
        root.cdata_child("wp:status", "publish")
        assert "<wp:status><![CDATA[publish]]></wp:status>" in etree.tostring(
            root.element, encoding="unicode",
        )

    def test_meta_pair(self) -> None:
        root = Node.root("rss")
        pair = root.meta_pair("wp:postmeta", "_thumbnail_id", 5)
        assert len(pair) == 2
        assert "<wp:meta_key>_thumbnail_id</wp:meta_key><wp:meta_value>5</wp:meta_value>" in (
            etree.tostring(root.element, encoding="unicode")
        )

    def test_detach(self) -> None:
        root = Node.root("rss")
        child = root.child("item")
        child.detach()
        assert len(root) == 0
        child.detach()  # already detached: no-op


class TestRender:
    """render — declaration, compact and pretty output."""

    def _tree(self) -> Node:
        root = Node.root("rss", version="2.0")
        channel = root.child("channel")
        channel.child("title", "T")
        item = channel.child("item")
        item.cdata_child("content:encoded", "line one\nline two")
        return root

    def test_compact(self) -> None:
        xml = render(self._tree(), RenderConfig())
        assert xml.startswith(XML_DECLARATION + "<rss")
        assert "<channel><title>T</title><item>" in xml

    def test_pretty_default(self) -> None:
        xml = render(self._tree(), RenderConfig(pretty=True))
        assert xml.split("\n")[2:5] == [
            "    <channel>",
            "        <title>T</title>",
            "        <item>",
        ]

    def test_pretty_preserves_content_newlines(self) -> None:
        xml = render(self._tree(), RenderConfig(pretty=True, newline="\r\n"))
        assert "<![CDATA[line one\nline two]]>" in xml
        assert "\r\n    <channel>\r\n" in xml
        assert "&#13;" not in xml

    def test_pretty_leaves_tree_compact(self) -> None:
        tree = self._tree()
        before = render(tree, RenderConfig())
        render(tree, RenderConfig(pretty=True, indent="  "))
        assert render(tree, RenderConfig()) == before
