"""RyanData Zipcodes Core - input normalization and error types.

Usage:
    from ryandata_zipcodes.core import (
        ZipCodeNormalizer,
        normalize_and_validate,
        ZipcodeError,
        InvalidFormat,
        InvalidCharacters,
        DatasetLoadError,
    )
"""

from __future__ import annotations

from ryandata_zipcodes.core.errors import (
    PACKAGE_NAME,
    DatasetLoadError,
    InvalidCharacters,
    InvalidFormat,
    ZipcodeError,
)
from ryandata_zipcodes.core.zip_normalizer import (
    ZIPCODE_LENGTH,
    ZipCodeNormalizer,
    get_zip_normalizer,
    normalize_and_validate,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "ZipcodeError",
    "InvalidFormat",
    "InvalidCharacters",
    "DatasetLoadError",
    # ZIP code normalization
    "ZIPCODE_LENGTH",
    "ZipCodeNormalizer",
    "get_zip_normalizer",
    "normalize_and_validate",
]
