"""ZIP code record model.

One ``Zipcode`` is one row of the bundled dataset. Field names match the JSON
keys of the dataset so records round-trip through ``to_json()`` and
``Zipcode.model_validate_json()`` unchanged.

Example record:
    {
        "acceptable_cities": [],
        "active": true,
        "area_codes": ["281", "346", "713", "832"],
        "city": "Cypress",
        "country": "US",
        "county": "Harris County",
        "lat": "29.9766",
        "long": "-95.6358",
        "state": "TX",
        "timezone": "America/Chicago",
        "unacceptable_cities": [],
        "world_region": "NA",
        "zip_code": "77429",
        "zip_code_type": "STANDARD"
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ryandata_zipcodes.models.enums import ZipCodeType


class Zipcode(BaseModel):
    """A single postal code and its geographic metadata.

    Records are frozen: list-valued fields are stored as tuples and
    attribute assignment raises, so one loaded dataset can be shared by
    every caller.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    zip_code: str = Field(description="The 5-digit ZIP code")
    active: bool = Field(description="Whether the ZIP code is currently in use")
    city: str = Field(description="Primary city name")
    county: str = Field(default="", description="County name")
    state: str = Field(description="State, territory or military postal abbreviation")
    country: str = Field(description="Country code")
    lat: str = Field(description="Latitude, as published")
    long: str = Field(description="Longitude, as published")
    timezone: str = Field(description="IANA timezone name")
    world_region: str = Field(description="Coarse world region, e.g. 'NA'")
    acceptable_cities: tuple[str, ...] = Field(
        description="Alternative city names USPS accepts for this ZIP"
    )
    unacceptable_cities: tuple[str, ...] = Field(
        description="City names USPS does not accept for this ZIP"
    )
    area_codes: tuple[str, ...] = Field(description="Telephone area codes, in published order")
    zip_code_type: str = Field(
        description="Classification tag (STANDARD, PO BOX, UNIQUE, MILITARY)",
    )

    @property
    def type_enum(self) -> ZipCodeType | None:
        """The classification as a ZipCodeType, or None for unknown tags."""
        try:
            return ZipCodeType(self.zip_code_type)
        except ValueError:
            return None

    @property
    def latitude(self) -> float | None:
        """Latitude as a float, or None when not published."""
        return _to_float(self.lat)

    @property
    def longitude(self) -> float | None:
        """Longitude as a float, or None when not published."""
        return _to_float(self.long)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dict in the dataset's shape."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Serialize to a JSON object string in the dataset's shape."""
        return self.model_dump_json()


def _to_float(value: str) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None
