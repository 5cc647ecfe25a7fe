"""ZIP code normalization and validation.

A code is accepted when the first five characters of the trimmed input are
ASCII digits. Whatever follows ("-6789", " 6789", or anything else) is
ignored, so "12345", "12345-6789" and "12345 6789" all normalize to "12345".
"""

from __future__ import annotations

from typing import Any

from ryandata_zipcodes.core.errors import InvalidCharacters, InvalidFormat, ZipcodeError

ZIPCODE_LENGTH = 5

_DIGITS = frozenset("0123456789")


class ZipCodeNormalizer:
    """Turns caller input into a canonical 5-digit ZIP code.

    Example:
        >>> normalizer = ZipCodeNormalizer()
        >>> normalizer.clean(" 06902-1234 ")
        '06902'
        >>> normalizer.validate("06x02")
        (None, 'Invalid characters, zipcode may only contain digits and "-".')
    """

    def __init__(self, length: int = ZIPCODE_LENGTH) -> None:
        self._length = length

    @property
    def length(self) -> int:
        """Number of significant leading characters."""
        return self._length

    def clean(self, value: Any) -> str:
        """Normalize and validate a ZIP code, raising on bad input.

        Args:
            value: Raw ZIP code ("#####", "#####-####" or "##### ####").

        Returns:
            The canonical 5-digit code.

        Raises:
            InvalidFormat: If the input is not a string or has fewer than
                five characters after trimming.
            InvalidCharacters: If any of the first five characters is not
                a decimal digit.
        """
        if not isinstance(value, str):
            raise InvalidFormat.for_value(value)

        head = value.strip()[: self._length]
        if len(head) < self._length:
            raise InvalidFormat.for_value(value)
        # str.isdigit() accepts superscripts and other non-ASCII digits
        if not all(c in _DIGITS for c in head):
            raise InvalidCharacters.for_value(value)
        return head

    def validate(self, value: Any) -> tuple[str | None, str | None]:
        """Validate a ZIP code without raising.

        Args:
            value: Raw ZIP code string.

        Returns:
            Tuple of (cleaned_value, error_message).
            cleaned_value is None if invalid.
            error_message is None if valid.
        """
        try:
            return self.clean(value), None
        except ZipcodeError as e:
            return None, e.message()

    def is_well_formed(self, value: Any) -> bool:
        """Check whether the input passes format validation."""
        return self.validate(value)[1] is None


# Module-level singleton for convenience
_default_normalizer = ZipCodeNormalizer()


def get_zip_normalizer() -> ZipCodeNormalizer:
    """Get the default ZipCodeNormalizer singleton.

    Returns:
        Shared ZipCodeNormalizer instance.
    """
    return _default_normalizer


def normalize_and_validate(code: Any) -> str:
    """Normalize a ZIP code to its canonical 5-digit form.

    Args:
        code: Raw ZIP code string.

    Returns:
        The first five characters of the trimmed input.

    Raises:
        InvalidFormat: If fewer than five characters remain after trimming.
        InvalidCharacters: If those five characters are not all digits.
    """
    return _default_normalizer.clean(code)
