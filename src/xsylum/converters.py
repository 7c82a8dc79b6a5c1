"""String converters for attribute and element values."""

from __future__ import annotations

import logging
import re
import threading
from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

from xsylum.errors import NumericFormatError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


class Converter(ABC, Generic[T]):
    """Base class for string converters."""

    @abstractmethod
    def convert(self, value: str) -> T:
        """Convert a string value.

        Args:
            value: The raw string to convert.

        Returns:
            The converted value.
        """

    def __call__(self, value: str) -> T:
        return self.convert(value)


class BooleanConverter(Converter[bool]):
    """Converts strings to booleans. Never fails."""

    TRUE_VALUES = frozenset({"true", "1", "yes", "y"})

    def convert(self, value: str) -> bool:
        return value.lower() in self.TRUE_VALUES


class IntegerConverter(Converter[int]):
    """Converts strings to integers within a fixed range."""

    def __init__(self, min_value: int, max_value: int, target: str = "integer"):
        self.min_value = min_value
        self.max_value = max_value
        self.target = target

    def convert(self, value: str) -> int:
        if not INTEGER_LITERAL.fullmatch(value):
            raise NumericFormatError(value, self.target)

        parsed = int(value, 10)
        if not self.min_value <= parsed <= self.max_value:
            raise NumericFormatError(
                value,
                self.target,
                f"out of range [{self.min_value}, {self.max_value}]",
            )

        return parsed


class DoubleConverter(Converter[float]):
    """Converts strings to floats."""

    def convert(self, value: str) -> float:
        try:
            return float(value)
        except ValueError as exc:
            raise NumericFormatError(value, "double") from exc


class EnumConverter(Converter[Optional[E]]):
    """Converts member names to members of an enum type.

    Matching is exact and case-sensitive. Unknown names convert to None.
    """

    def __init__(self, enum_type: type[E]):
        self.enum_type = enum_type
        self._members: Mapping[str, E] = MappingProxyType(dict(enum_type.__members__))

    @property
    def names(self) -> list[str]:
        """Get the member names this converter recognizes."""
        return list(self._members)

    def convert(self, value: str) -> E | None:
        return self._members.get(value)


class EnumConverterCache:
    """Process-wide cache of enum converters, keyed by enum type.

    Converters are built on first use and never evicted. Builds happen
    outside the lock; the first published converter for a type wins, so
    every caller sees the same fully built instance.
    """

    def __init__(self) -> None:
        self._converters: dict[type[Enum], EnumConverter[Any]] = {}
        self._lock = threading.Lock()

    def converter_for(self, enum_type: type[E]) -> EnumConverter[E]:
        """Get the converter for ``enum_type``, building it if needed.

        Raises:
            TypeError: If ``enum_type`` is not an Enum subclass.
        """
        converter = self._converters.get(enum_type)
        if converter is not None:
            return converter

        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise TypeError(f"Expected an Enum subclass, got {enum_type!r}")

        built = EnumConverter(enum_type)
        with self._lock:
            converter = self._converters.setdefault(enum_type, built)
        if converter is built:
            logger.debug(
                "Cached enum converter for %s (%d members)",
                enum_type.__qualname__,
                len(built.names),
            )
        return converter

    def __contains__(self, enum_type: object) -> bool:
        return enum_type in self._converters

    def __len__(self) -> int:
        return len(self._converters)


boolean_converter = BooleanConverter()
int_converter = IntegerConverter(INT_MIN, INT_MAX, "int")
long_converter = IntegerConverter(LONG_MIN, LONG_MAX, "long")
double_converter = DoubleConverter()

enum_converters = EnumConverterCache()


def enum_converter_for(enum_type: type[E]) -> EnumConverter[E]:
    """Get the shared converter for ``enum_type``."""
    return enum_converters.converter_for(enum_type)


def converter_for(target: type) -> Converter[Any]:
    """Get the converter registered for a target type.

    Args:
        target: ``bool``, ``int``, ``float`` or an Enum subclass.

    Returns:
        The matching converter. ``int`` maps to the 64-bit converter.

    Raises:
        TypeError: If no converter handles ``target``.
    """
    if target is bool:
        return boolean_converter
    if target is int:
        return long_converter
    if target is float:
        return double_converter
    if isinstance(target, type) and issubclass(target, Enum):
        return enum_converter_for(target)
    raise TypeError(f"No converter registered for {target!r}")
