"""ZIP code field enumerations and constants."""

from __future__ import annotations

from enum import Enum


class ZipCodeType(str, Enum):
    """USPS classification of a ZIP code."""

    STANDARD = "STANDARD"
    PO_BOX = "PO BOX"
    UNIQUE = "UNIQUE"
    MILITARY = "MILITARY"


class ZipcodeField(str, Enum):
    """Enumeration of all record fields, named as in the bundled dataset."""

    ACCEPTABLE_CITIES = "acceptable_cities"
    ACTIVE = "active"
    AREA_CODES = "area_codes"
    CITY = "city"
    COUNTRY = "country"
    COUNTY = "county"
    LAT = "lat"
    LONG = "long"
    STATE = "state"
    TIMEZONE = "timezone"
    UNACCEPTABLE_CITIES = "unacceptable_cities"
    WORLD_REGION = "world_region"
    ZIP_CODE = "zip_code"
    ZIP_CODE_TYPE = "zip_code_type"


ZIPCODE_FIELDS: list[str] = [f.value for f in ZipcodeField]
