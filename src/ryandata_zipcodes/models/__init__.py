"""ZIP code models package.

This package contains the record model and field enumerations.
"""

from __future__ import annotations

from ryandata_zipcodes.models.enums import (
    ZIPCODE_FIELDS,
    ZipCodeType,
    ZipcodeField,
)
from ryandata_zipcodes.models.zipcode import Zipcode

__all__ = [
    # Enums and constants
    "ZipCodeType",
    "ZipcodeField",
    "ZIPCODE_FIELDS",
    # Records
    "Zipcode",
]
