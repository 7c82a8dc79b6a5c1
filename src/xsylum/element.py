"""Element wrapper."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from xsylum.converters import (
    boolean_converter,
    converter_for,
    double_converter,
    enum_converter_for,
    int_converter,
    long_converter,
)
from xsylum.errors import AttributeNotFoundError
from xsylum.searchable import SearchScope
from xsylum.tree import ChildNode, NodeKind, TreeAdapter, adapter_for

E = TypeVar("E", bound=Enum)


class XmlElement:
    """A named XML element.

    Wraps an element of an existing tree without copying it. Searching by
    tag name only looks at direct children.

    Example:
        from xml.dom import minidom
        from xsylum import XmlDocument

        doc = XmlDocument(minidom.parseString('<a><b id="1">x</b></a>'))
        b = doc.root.get("b")
        b.attribute_as_int("id")  # 1
        b.to_xml()  # '<b id="1">x</b>'
    """

    scope = SearchScope.CHILDREN

    def __init__(self, element: Any, adapter: TreeAdapter | None = None):
        self._adapter = adapter or adapter_for(element)
        if not self._adapter.is_element(element):
            raise TypeError(f"Expected an element, got {type(element).__name__}")
        self._element = element

    @property
    def element(self) -> Any:
        """Get the underlying element."""
        return self._element

    @property
    def name(self) -> str:
        """Get the element's tag name."""
        return self._adapter.tag_name(self._element)

    # Searching

    def get(self, key: str | int) -> XmlElement | None:
        """Get a child element by tag name or by position.

        Args:
            key: A tag name, matched against direct child elements, or an
                index into all child nodes (text and comments included).

        Returns:
            The first child element with the tag name, or the child at the
            index if it is an element. None otherwise.

        Raises:
            IndexError: If an index is negative or out of range.
        """
        if isinstance(key, int):
            if key < 0:
                raise IndexError(f"Child index must not be negative: {key}")
            child = self._child_nodes()[key]
            return self._wrap(child.node) if child.kind is NodeKind.ELEMENT else None

        for child in self._child_elements():
            if self._adapter.tag_name(child) == key:
                return self._wrap(child)
        return None

    def get_all(self, tag_name: str) -> list[XmlElement]:
        """Get all direct child elements matching ``tag_name``."""
        return [
            self._wrap(child)
            for child in self._child_elements()
            if self._adapter.tag_name(child) == tag_name
        ]

    @property
    def children(self) -> list[XmlElement]:
        """Get the element's child elements, else an empty list."""
        return [self._wrap(child) for child in self._child_elements()]

    @property
    def node_count(self) -> int:
        """Get the number of child nodes of any kind."""
        return len(self._child_nodes())

    def has_child(self, name: str) -> bool:
        """Check if any direct child element is called ``name``."""
        return any(self._adapter.tag_name(child) == name for child in self._child_elements())

    # Attributes

    @property
    def attributes(self) -> dict[str, str]:
        """Get the element's attributes, else an empty dict."""
        return dict(self._adapter.attributes(self._element))

    def has_attribute(self, name: str) -> bool:
        """Check if the element carries the attribute ``name``."""
        return self._adapter.has_attribute(self._element, name)

    def has_attributes(self) -> bool:
        """Check if the element carries any attributes."""
        return bool(self._adapter.attributes(self._element))

    def attribute(self, name: str) -> str:
        """Get the value of the attribute ``name``.

        An attribute that is present with an empty value returns "".

        Raises:
            AttributeNotFoundError: If the attribute is not present.
        """
        if not self._adapter.has_attribute(self._element, name):
            raise AttributeNotFoundError(name)
        return self._adapter.get_attribute(self._element, name)

    def attribute_as_boolean(self, name: str) -> bool:
        """Get an attribute as a boolean.

        Returns True for "true", "1", "yes" and "y" ignoring case, else False.

        Raises:
            AttributeNotFoundError: If the attribute is not present.
        """
        return boolean_converter.convert(self.attribute(name))

    def attribute_as_int(self, name: str) -> int:
        """Get an attribute as a 32-bit integer.

        Raises:
            AttributeNotFoundError: If the attribute is not present.
            NumericFormatError: If the value is not a valid int.
        """
        return int_converter.convert(self.attribute(name))

    def attribute_as_long(self, name: str) -> int:
        """Get an attribute as a 64-bit integer.

        Raises:
            AttributeNotFoundError: If the attribute is not present.
            NumericFormatError: If the value is not a valid long.
        """
        return long_converter.convert(self.attribute(name))

    def attribute_as_double(self, name: str) -> float:
        """Get an attribute as a float.

        Raises:
            AttributeNotFoundError: If the attribute is not present.
            NumericFormatError: If the value is not a valid double.
        """
        return double_converter.convert(self.attribute(name))

    def attribute_as_enum(self, name: str, enum_type: type[E]) -> E | None:
        """Get an attribute as a member of ``enum_type``.

        Returns None if the value names no member of ``enum_type``.

        Raises:
            AttributeNotFoundError: If the attribute is not present.
        """
        return enum_converter_for(enum_type).convert(self.attribute(name))

    def attribute_as(self, name: str, target: type) -> Any:
        """Get an attribute converted to ``target`` (bool, int, float or an Enum)."""
        return converter_for(target).convert(self.attribute(name))

    # Text value

    @property
    def value(self) -> str:
        """Get the text of the element's direct text and CDATA children."""
        return "".join(
            child.data
            for child in self._child_nodes()
            if child.kind in (NodeKind.TEXT, NodeKind.CDATA)
        )

    def value_as_boolean(self) -> bool:
        """Get the value as a boolean, see ``attribute_as_boolean``."""
        return boolean_converter.convert(self.value)

    def value_as_int(self) -> int:
        """Get the value as a 32-bit integer.

        Raises:
            NumericFormatError: If the value is not a valid int.
        """
        return int_converter.convert(self.value)

    def value_as_long(self) -> int:
        """Get the value as a 64-bit integer.

        Raises:
            NumericFormatError: If the value is not a valid long.
        """
        return long_converter.convert(self.value)

    def value_as_double(self) -> float:
        """Get the value as a float.

        Raises:
            NumericFormatError: If the value is not a valid double.
        """
        return double_converter.convert(self.value)

    def value_as_enum(self, enum_type: type[E]) -> E | None:
        """Get the value as a member of ``enum_type``, else None."""
        return enum_converter_for(enum_type).convert(self.value)

    def value_as(self, target: type) -> Any:
        """Get the value converted to ``target`` (bool, int, float or an Enum)."""
        return converter_for(target).convert(self.value)

    # Serialization

    def to_xml(self) -> str:
        """Render the element, its attributes and its content as XML text.

        Text is written as is, CDATA keeps its wrapper, comments and
        processing instructions are left out. An element without child
        nodes is written as a self-closing tag.

        lxml trees do not keep CDATA sections apart from text, so their
        CDATA content is written as plain text and may not be well-formed.
        """
        name = self.name
        parts = ["<", name]

        attributes = self._adapter.attributes(self._element)
        if attributes:
            parts.append(" ")
            parts.append(" ".join(f'{key}="{value}"' for key, value in attributes))

        children = self._child_nodes()
        if not children:
            parts.append("/>")
            return "".join(parts)

        parts.append(">")
        for child in children:
            if child.kind is NodeKind.ELEMENT:
                parts.append(self._wrap(child.node).to_xml())
            elif child.kind is NodeKind.TEXT:
                parts.append(child.data)
            elif child.kind is NodeKind.CDATA:
                parts.append(f"<![CDATA[{child.data}]]>")
        parts.append(f"</{name}>")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_xml()

    def __repr__(self) -> str:
        return f"XmlElement({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlElement):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    def _child_nodes(self) -> list[ChildNode]:
        return self._adapter.child_nodes(self._element)

    def _child_elements(self) -> list[Any]:
        return [child.node for child in self._child_nodes() if child.kind is NodeKind.ELEMENT]

    def _wrap(self, element: Any) -> XmlElement:
        return XmlElement(element, self._adapter)
