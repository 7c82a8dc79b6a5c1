"""Read-only access to the XML trees wrapped by xsylum.

xsylum never parses XML itself. It reads trees built elsewhere through a
small adapter interface, with one adapter per supported tree family:

- ``DomAdapter`` for W3C DOM trees such as ``xml.dom.minidom``. CDATA
  sections are reported as their own child kind.
- ``LxmlAdapter`` for ``lxml.etree`` trees. lxml folds CDATA into the
  surrounding text when read, so CDATA content is reported as text.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lxml import etree

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# W3C DOM node type codes
DOM_ELEMENT_NODE = 1
DOM_TEXT_NODE = 3
DOM_CDATA_SECTION_NODE = 4
DOM_DOCUMENT_NODE = 9


class NodeKind(Enum):
    """Kinds of child nodes, as far as xsylum cares."""

    ELEMENT = "element"
    TEXT = "text"
    CDATA = "cdata"
    OTHER = "other"  # Comments, processing instructions, entity references


@dataclass(frozen=True)
class ChildNode:
    """A direct child of an element."""

    kind: NodeKind
    node: Any  # Raw node, None for lxml text runs
    data: str = ""  # Character data for TEXT and CDATA children


class TreeAdapter(ABC):
    """Minimal read-only interface over a family of XML trees."""

    name: str = ""

    @abstractmethod
    def is_document(self, node: Any) -> bool:
        """Check if ``node`` is a document container of this tree family."""

    @abstractmethod
    def is_element(self, node: Any) -> bool:
        """Check if ``node`` is an element of this tree family."""

    @abstractmethod
    def document_element(self, document: Any) -> Any:
        """Get the document element of ``document``."""

    @abstractmethod
    def tag_name(self, element: Any) -> str:
        """Get the qualified tag name of ``element``."""

    @abstractmethod
    def attributes(self, element: Any) -> list[tuple[str, str]]:
        """Get the attributes of ``element`` as (name, value) pairs in tree order."""

    @abstractmethod
    def has_attribute(self, element: Any, name: str) -> bool:
        """Check if ``element`` carries the attribute ``name``."""

    @abstractmethod
    def get_attribute(self, element: Any, name: str) -> str:
        """Get the value of attribute ``name``.

        Only meaningful when ``has_attribute`` is true; trees differ in
        what they return for missing attributes.
        """

    @abstractmethod
    def child_nodes(self, element: Any) -> list[ChildNode]:
        """Get all direct child nodes of ``element`` in document order."""

    @abstractmethod
    def elements_by_tag_name(self, document: Any, tag_name: str) -> list[Any]:
        """Get every element named ``tag_name`` in ``document``, in document order.

        The name ``"*"`` matches all elements.
        """


class DomAdapter(TreeAdapter):
    """Adapter for W3C DOM trees (``xml.dom.minidom`` and compatible)."""

    name = "dom"

    def is_document(self, node: Any) -> bool:
        return getattr(node, "nodeType", None) == DOM_DOCUMENT_NODE

    def is_element(self, node: Any) -> bool:
        return getattr(node, "nodeType", None) == DOM_ELEMENT_NODE

    def document_element(self, document: Any) -> Any:
        return document.documentElement

    def tag_name(self, element: Any) -> str:
        return element.nodeName

    def attributes(self, element: Any) -> list[tuple[str, str]]:
        attrs = element.attributes
        if attrs is None:
            return []
        result = []
        for i in range(attrs.length):
            attr = attrs.item(i)
            result.append((attr.nodeName, attr.nodeValue))
        return result

    def has_attribute(self, element: Any, name: str) -> bool:
        return element.hasAttribute(name)

    def get_attribute(self, element: Any, name: str) -> str:
        return element.getAttribute(name)

    def child_nodes(self, element: Any) -> list[ChildNode]:
        children = []
        for child in element.childNodes:
            node_type = child.nodeType
            if node_type == DOM_ELEMENT_NODE:
                children.append(ChildNode(NodeKind.ELEMENT, child))
            elif node_type == DOM_TEXT_NODE:
                children.append(ChildNode(NodeKind.TEXT, child, child.data))
            elif node_type == DOM_CDATA_SECTION_NODE:
                children.append(ChildNode(NodeKind.CDATA, child, child.data))
            else:
                children.append(ChildNode(NodeKind.OTHER, child))
        return children

    def elements_by_tag_name(self, document: Any, tag_name: str) -> list[Any]:
        return list(document.getElementsByTagName(tag_name))


class LxmlAdapter(TreeAdapter):
    """Adapter for ``lxml.etree`` trees.

    Names are reported in ``prefix:local`` form so they compare the same
    way DOM qualified names do. Namespace declarations introduced on an
    element are reported as ``xmlns`` attributes ahead of the real ones.
    """

    name = "lxml"

    def is_document(self, node: Any) -> bool:
        return isinstance(node, etree._ElementTree)

    def is_element(self, node: Any) -> bool:
        # Comments and processing instructions subclass _Element but have
        # a non-string tag.
        return isinstance(node, etree._Element) and isinstance(node.tag, str)

    def document_element(self, document: Any) -> Any:
        return document.getroot()

    def tag_name(self, element: Any) -> str:
        localname = etree.QName(element).localname
        if element.prefix:
            return f"{element.prefix}:{localname}"
        return localname

    def attributes(self, element: Any) -> list[tuple[str, str]]:
        result = self._namespace_declarations(element)
        for key, value in element.attrib.items():
            result.append((self._attribute_name(element, key), value))
        return result

    def has_attribute(self, element: Any, name: str) -> bool:
        return any(key == name for key, _ in self.attributes(element))

    def get_attribute(self, element: Any, name: str) -> str:
        for key, value in self.attributes(element):
            if key == name:
                return value
        return ""

    def child_nodes(self, element: Any) -> list[ChildNode]:
        children = []
        if element.text:
            children.append(ChildNode(NodeKind.TEXT, None, element.text))
        for child in element:
            kind = NodeKind.ELEMENT if isinstance(child.tag, str) else NodeKind.OTHER
            children.append(ChildNode(kind, child))
            if child.tail:
                children.append(ChildNode(NodeKind.TEXT, None, child.tail))
        return children

    def elements_by_tag_name(self, document: Any, tag_name: str) -> list[Any]:
        root = document.getroot() if self.is_document(document) else document
        if root is None:
            return []
        return [
            element
            for element in root.iter(etree.Element)
            if tag_name == "*" or self.tag_name(element) == tag_name
        ]

    def _namespace_declarations(self, element: Any) -> list[tuple[str, str]]:
        parent = element.getparent()
        inherited = parent.nsmap if parent is not None else {}
        declarations = []
        for prefix, uri in element.nsmap.items():
            if prefix in inherited and inherited[prefix] == uri:
                continue
            declarations.append(("xmlns" if prefix is None else f"xmlns:{prefix}", uri))
        return declarations

    def _attribute_name(self, element: Any, key: str) -> str:
        if not key.startswith("{"):
            return key
        uri, localname = key[1:].split("}", 1)
        if uri == XML_NAMESPACE:
            return f"xml:{localname}"
        for prefix, ns_uri in element.nsmap.items():
            if prefix is not None and ns_uri == uri:
                return f"{prefix}:{localname}"
        return key


DOM_ADAPTER = DomAdapter()
LXML_ADAPTER = LxmlAdapter()


def adapter_for(node: Any) -> TreeAdapter:
    """Pick the adapter able to read ``node``.

    Raises:
        TypeError: If ``node`` belongs to no supported tree family.
    """
    if isinstance(node, (etree._Element, etree._ElementTree)):
        adapter: TreeAdapter = LXML_ADAPTER
    elif hasattr(node, "nodeType") and hasattr(node, "childNodes"):
        adapter = DOM_ADAPTER
    else:
        raise TypeError(f"Unsupported XML node type: {type(node).__name__}")
    logger.debug("Reading %s through the %s adapter", type(node).__name__, adapter.name)
    return adapter
