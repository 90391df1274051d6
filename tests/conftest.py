"""Shared test fixtures for wxr."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest
from lxml import etree

from wxr.generator import WxrGenerator
from wxr.ids import sequence

FIXED_NOW = datetime(2024, 3, 9, 14, 5, 7)


@pytest.fixture
def generator() -> WxrGenerator:
    """A generator with sequential ids starting at 1 and a frozen clock."""
    return WxrGenerator(
        name="Test Site",
        url="https://example.com",
        description="Just testing",
        ids=sequence(1),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def parse() -> Callable[[str], etree._Element]:
    """Parse rendered output back into an lxml tree (CDATA becomes text)."""

    def _parse(xml: str) -> etree._Element:
        return etree.fromstring(xml.encode("utf-8"))

    return _parse


@pytest.fixture
def channel(generator: WxrGenerator, parse: Callable[[str], etree._Element]) -> Callable[[], etree._Element]:
    """Render ``generator`` and return its ``<channel>`` element."""

    def _channel() -> etree._Element:
        return parse(generator.stringify()).find("channel")

    return _channel
