"""Error types raised by xsylum."""

from __future__ import annotations

from typing import Any


class XsylumError(Exception):
    """Base class for errors raised by xsylum.

    Accepts a %-style format string and its arguments.
    """

    def __init__(self, message: str, *args: Any):
        super().__init__(message % args if args else message)


class AttributeNotFoundError(XsylumError):
    """Raised when a requested attribute is not present on an element."""

    def __init__(self, attribute: str):
        super().__init__("Attribute %s does not exist", attribute)
        self.attribute = attribute


class NumericFormatError(XsylumError, ValueError):
    """Raised when a string is not a valid literal of a numeric type."""

    def __init__(self, value: str, target: str, reason: str | None = None):
        message = f"Invalid {target} value: '{value}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value
        self.target = target
