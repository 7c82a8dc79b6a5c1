"""Tag name search shared by documents and elements."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from xsylum.element import XmlElement


class SearchScope(Enum):
    """Which elements a tag name search looks at."""

    DESCENDANTS = "descendants"  # Every element at any depth, in document order
    CHILDREN = "children"  # Direct child elements only, in document order


@runtime_checkable
class Searchable(Protocol):
    """Something that can be searched for elements by tag name.

    ``XmlDocument`` searches the whole document while ``XmlElement`` only
    searches its direct children. Check ``scope`` to tell them apart.
    """

    scope: SearchScope

    def get(self, tag_name: str) -> XmlElement | None:
        """Get the first element matching ``tag_name``, or None."""
        ...

    def get_all(self, tag_name: str) -> list[XmlElement]:
        """Get every element matching ``tag_name``, possibly none."""
        ...
