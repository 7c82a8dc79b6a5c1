"""Shared XML fixture loading helpers for tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from xml.dom import minidom

from lxml import etree

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TREE_KINDS = ("dom", "lxml")


def load_fixture_bytes(*parts: str) -> bytes:
    """Load fixture contents as raw bytes."""
    return (FIXTURES_DIR.joinpath(*parts)).read_bytes()


def parse_dom(xml: str | bytes) -> minidom.Document:
    """Build a W3C DOM document from XML text."""
    return minidom.parseString(xml)


def parse_lxml(xml: str | bytes) -> etree._ElementTree:
    """Build an lxml tree from XML text, keeping CDATA sections."""
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    parser = etree.XMLParser(strip_cdata=False)
    return etree.ElementTree(etree.fromstring(xml, parser))


PARSERS: dict[str, Callable[[str | bytes], object]] = {
    "dom": parse_dom,
    "lxml": parse_lxml,
}
