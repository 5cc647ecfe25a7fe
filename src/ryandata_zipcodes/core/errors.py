"""ZIP code error classes with package identification.

Validation errors subclass PydanticCustomError so they carry a machine-readable
``type`` and a context dict, and can be raised from inside pydantic validators
as well as directly from query functions.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "ryandata_zipcodes"


class ZipcodeError(PydanticCustomError):
    """Base class for ZIP code validation errors.

    Instances are created through ``for_value()`` so every error carries the
    package name and the offending input in its context.
    """

    error_type: str = "zipcode_error"
    default_message: str = "Invalid zipcode"

    @classmethod
    def for_value(cls, value: Any, context: dict | None = None) -> ZipcodeError:
        """Build an error of this class for the given input value.

        Args:
            value: The input that failed validation.
            context: Additional context to include in the error.

        Returns:
            Error instance with package and value context.
        """
        ctx = {
            "package": PACKAGE_NAME,
            "value": value if isinstance(value, str) else repr(value),
            **(context or {}),
        }
        return cls(cls.error_type, cls.default_message, ctx)

    @property
    def value(self) -> str | None:
        """The input that failed validation."""
        return (self.context or {}).get("value")


class InvalidFormat(ZipcodeError):
    """Input is too short (or not a string) to hold a 5-digit ZIP code."""

    error_type = "invalid_format"
    default_message = 'Invalid format, zipcode must be of the format: "#####" or "#####-####"'


class InvalidCharacters(ZipcodeError):
    """The first five characters of the input are not all digits."""

    error_type = "invalid_characters"
    default_message = 'Invalid characters, zipcode may only contain digits and "-".'


class DatasetLoadError(RuntimeError):
    """The ZIP code dataset could not be decompressed or parsed.

    The bundled dataset is a build artifact; this error means the package
    itself is broken and no lookup can be served. It is intentionally not a
    ZipcodeError, so callers handling bad input never catch it by accident.
    """

    def __init__(self, source: str, cause: Exception) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"failed to deserialize zipcode database from {source}: {cause}")
