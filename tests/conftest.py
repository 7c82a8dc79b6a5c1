"""pytest configuration and fixtures for xsylum tests."""

from __future__ import annotations

from typing import Callable

import pytest

from tests.fixture_loader import PARSERS, TREE_KINDS, load_fixture_bytes, parse_dom
from xsylum import XmlDocument, XmlElement


@pytest.fixture(params=TREE_KINDS)
def tree_kind(request: pytest.FixtureRequest) -> str:
    """Run a test once per supported tree family."""
    return request.param


@pytest.fixture
def make_document(tree_kind: str) -> Callable[[str], XmlDocument]:
    """Provide a factory wrapping XML text parsed by each tree family."""

    def _make(xml: str) -> XmlDocument:
        return XmlDocument(PARSERS[tree_kind](xml))

    return _make


@pytest.fixture
def make_dom_document() -> Callable[[str], XmlDocument]:
    """Provide a factory wrapping XML text parsed as a W3C DOM only."""

    def _make(xml: str) -> XmlDocument:
        return XmlDocument(parse_dom(xml))

    return _make


@pytest.fixture
def catalog(tree_kind: str) -> XmlDocument:
    """Provide the catalog fixture document."""
    return XmlDocument(PARSERS[tree_kind](load_fixture_bytes("catalog.xml")))


@pytest.fixture
def book(catalog: XmlDocument) -> XmlElement:
    """Provide the first book of the catalog."""
    return catalog.get("book")
