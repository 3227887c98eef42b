from __future__ import annotations


class VCardError(Exception):
    """Base class for every error raised by vcardkit."""


class MissingRequiredFieldError(VCardError):
    """A required value (phone number, email address) is absent at encode time."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' is required")


class InvalidFieldTypeError(VCardError):
    """A ``types`` value is not an ordered sequence of strings."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' should be a list of strings")


class MalformedInputError(VCardError):
    """Raw text does not tokenize or map onto a recognized property."""

    def __init__(
        self,
        message: str,
        property_name: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.property_name = property_name
        self.line_number = line_number
        super().__init__(message)


__all__ = [
    "VCardError",
    "MissingRequiredFieldError",
    "InvalidFieldTypeError",
    "MalformedInputError",
]
