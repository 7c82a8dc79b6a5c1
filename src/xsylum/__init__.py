"""xsylum - typed access to already-parsed XML trees.

Wrap a W3C DOM or lxml tree and read names, attributes, text and
structure without hand-written conversions.

Example:
    from xml.dom import minidom
    from xsylum import XmlDocument

    doc = XmlDocument(minidom.parseString(
        '<config><server port="8080" secure="yes">main</server></config>'
    ))

    server = doc.get("server")
    server.attribute_as_int("port")  # 8080
    server.attribute_as_boolean("secure")  # True
    server.value  # "main"

    # Documents search at any depth, elements only among their children
    doc.root.get_all("server")
"""

from xsylum.converters import (
    BooleanConverter,
    Converter,
    DoubleConverter,
    EnumConverter,
    EnumConverterCache,
    IntegerConverter,
    converter_for,
    enum_converter_for,
)
from xsylum.document import XmlDocument
from xsylum.element import XmlElement
from xsylum.errors import AttributeNotFoundError, NumericFormatError, XsylumError
from xsylum.searchable import Searchable, SearchScope
from xsylum.tree import DomAdapter, LxmlAdapter, NodeKind, TreeAdapter, adapter_for

__version__ = "0.1.0"

__all__ = [
    # Main API
    "XmlDocument",
    "XmlElement",
    "Searchable",
    "SearchScope",
    # Errors
    "XsylumError",
    "AttributeNotFoundError",
    "NumericFormatError",
    # Conversion
    "Converter",
    "BooleanConverter",
    "IntegerConverter",
    "DoubleConverter",
    "EnumConverter",
    "EnumConverterCache",
    "converter_for",
    "enum_converter_for",
    # Tree adapters (for advanced usage)
    "TreeAdapter",
    "DomAdapter",
    "LxmlAdapter",
    "NodeKind",
    "adapter_for",
]
