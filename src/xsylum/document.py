"""Document wrapper."""

from __future__ import annotations

from typing import Any

from lxml import etree

from xsylum.element import XmlElement
from xsylum.searchable import SearchScope
from xsylum.tree import TreeAdapter, adapter_for


class XmlDocument:
    """An XML document.

    Searching by tag name looks at every element in the document,
    at any depth, in document order.
    """

    scope = SearchScope.DESCENDANTS

    def __init__(self, document: Any, adapter: TreeAdapter | None = None):
        if (
            isinstance(document, etree._Element)
            and isinstance(document.tag, str)
            and document.getparent() is None
        ):
            document = document.getroottree()
        self._adapter = adapter or adapter_for(document)
        if not self._adapter.is_document(document):
            raise TypeError(f"Expected a document, got {type(document).__name__}")
        self._document = document

    @property
    def document(self) -> Any:
        """Get the underlying document."""
        return self._document

    @property
    def root(self) -> XmlElement:
        """Get the root document element."""
        return XmlElement(self._adapter.document_element(self._document), self._adapter)

    def get(self, tag_name: str) -> XmlElement | None:
        """Get the first element in the document matching ``tag_name``."""
        elements = self._adapter.elements_by_tag_name(self._document, tag_name)
        return XmlElement(elements[0], self._adapter) if elements else None

    def get_all(self, tag_name: str) -> list[XmlElement]:
        """Get all elements in the document matching ``tag_name``."""
        return [
            XmlElement(element, self._adapter)
            for element in self._adapter.elements_by_tag_name(self._document, tag_name)
        ]

    def to_xml(self) -> str:
        """Render the root element as XML text, without a declaration."""
        return self.root.to_xml()

    def __str__(self) -> str:
        return self.to_xml()

    def __repr__(self) -> str:
        return f"XmlDocument(root={self.root.name!r})"
