"""Thin handle over lxml elements used by the generator.

Resolves ``prefix:name`` tags against the fixed WXR namespace map, converts
field values to text, and renders the finished tree.  Escaping and CDATA
rules are lxml's; values it rejects surface as ``ValueError``/``TypeError``.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from lxml import etree

if TYPE_CHECKING:
    from wxr.config import RenderConfig

NAMESPACES = {
    "excerpt": "http://wordpress.org/export/1.2/excerpt/",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "wfw": "http://wellformedweb.org/CommentAPI/",
    "dc": "http://purl.org/dc/elements/1.1/",
    "wp": "http://wordpress.org/export/1.2/",
}

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Stands in for line breaks while indenting; lxml would escape a literal "\r"
_NEWLINE_MARKER = "\ue000wxr-newline\ue000"


def qualify(tag: str) -> str:
    """Expand ``wp:post_id`` to lxml's ``{uri}post_id`` form."""
    prefix, sep, local = tag.partition(":")
    if not sep:
        return tag
    return f"{{{NAMESPACES[prefix]}}}{local}"


def to_text(value: object) -> str:
    """Convert a field value to element or attribute text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Node:
    """Handle on one element of the document tree."""

    __slots__ = ("_element",)

    def __init__(self, element: etree._Element) -> None:
        self._element = element

    @classmethod
    def root(cls, tag: str, **attrs: object) -> Node:
        """Create a detached root element declaring every WXR namespace."""
        element = etree.Element(qualify(tag), nsmap=NAMESPACES)
        for key, value in attrs.items():
            element.set(key, to_text(value))
        return cls(element)

    @property
    def element(self) -> etree._Element:
        return self._element

    def child(self, tag: str, text: object = None, **attrs: object) -> Node:
        """Append a child element with optional plain text and attributes.

        ``None`` text leaves the element empty.
        """
        element = etree.SubElement(self._element, qualify(tag))
        for key, value in attrs.items():
            element.set(key, to_text(value))
        if text is not None:
            element.text = to_text(text)
        return Node(element)

    def cdata_child(self, tag: str, text: object, **attrs: object) -> Node:
        """Append a child element whose text is a CDATA section."""
        node = self.child(tag, **attrs)
        node.element.text = etree.CDATA(to_text(text))
        return node

    def meta_pair(self, tag: str, key: object, value: object) -> Node:
        """Append a ``<tag><wp:meta_key/><wp:meta_value/></tag>`` pair."""
        node = self.child(tag)
        node.child("wp:meta_key", key)
        node.child("wp:meta_value", value)
        return node

    def detach(self) -> None:
        """Remove this element from its parent, if it has one."""
        parent = self._element.getparent()
        if parent is not None:
            parent.remove(self._element)

    def __len__(self) -> int:
        return len(self._element)


def render(root: Node, config: RenderConfig) -> str:
    """Serialize the tree rooted at ``root`` to a complete XML document.

    Pretty output indents a copy so the live tree is never touched.
    """
    element = root.element
    if not config.pretty:
        return XML_DECLARATION + etree.tostring(element, encoding="unicode")

    element = copy.deepcopy(element)
    _indent(element, config.indent, _NEWLINE_MARKER)
    body = etree.tostring(element, encoding="unicode")
    return XML_DECLARATION + config.newline + body.replace(_NEWLINE_MARKER, config.newline)


def _indent(element: etree._Element, indent: str, newline: str, level: int = 0) -> None:
    children = list(element)
    if not children:
        return
    pad = newline + indent * (level + 1)
    if not (element.text and element.text.strip()):
        element.text = pad
    for child in children:
        _indent(child, indent, newline, level + 1)
        child.tail = pad
    children[-1].tail = newline + indent * level
