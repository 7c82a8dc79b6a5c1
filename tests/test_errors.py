"""Tests for error types."""

from __future__ import annotations

from xsylum.errors import AttributeNotFoundError, NumericFormatError, XsylumError


class TestErrors:
    """Tests for the error hierarchy and messages."""

    def test_formatted_message(self) -> None:
        """Test messages are %-formatted from their arguments."""
        assert str(XsylumError("%s of %d", "one", 2)) == "one of 2"
        assert str(XsylumError("100%")) == "100%"

    def test_attribute_not_found(self) -> None:
        """Test the attribute name is kept and formatted."""
        error = AttributeNotFoundError("id")

        assert isinstance(error, XsylumError)
        assert error.attribute == "id"
        assert str(error) == "Attribute id does not exist"

    def test_numeric_format(self) -> None:
        """Test numeric errors are also ValueErrors."""
        error = NumericFormatError("1x", "int", "bad digit")

        assert isinstance(error, XsylumError)
        assert isinstance(error, ValueError)
        assert str(error) == "Invalid int value: '1x' (bad digit)"
        assert not isinstance(AttributeNotFoundError("a"), ValueError)
