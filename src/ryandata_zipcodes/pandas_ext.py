from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ryandata_zipcodes.core.errors import ZipcodeError
from ryandata_zipcodes.models import ZIPCODE_FIELDS, Zipcode

if TYPE_CHECKING:
    import pandas as pd

    from ryandata_zipcodes.service import ZipcodeService


class ZipcodeAccessor:
    """Pandas accessor for ZIP code lookups.

    Provides convenient methods for checking ZIP codes directly
    on pandas Series objects. Invalid or missing entries never raise;
    they map to None (or False for ``is_real``).

    Usage:
        >>> from ryandata_zipcodes.pandas_ext import register_accessor
        >>> register_accessor()
        >>> s = pd.Series(["06902", "77429-1234", "bad"])
        >>> s.zips.is_real()
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj

    @staticmethod
    def _get_service(service: ZipcodeService | None) -> ZipcodeService:
        if service is not None:
            return service
        from ryandata_zipcodes.service import get_default_service

        return get_default_service()

    def normalize(self, *, service: ZipcodeService | None = None) -> pd.Series:
        """Normalize each entry to a 5-digit code, None where invalid."""
        svc = self._get_service(service)

        def _normalize(value: Any) -> str | None:
            try:
                return svc.normalize(value)
            except ZipcodeError:
                return None

        return self._obj.map(_normalize)

    def is_real(self, *, service: ZipcodeService | None = None) -> pd.Series:
        """Check each entry exists in the dataset, False where invalid."""
        svc = self._get_service(service)

        def _is_real(value: Any) -> bool:
            try:
                return svc.is_real(value)
            except ZipcodeError:
                return False

        return self._obj.map(_is_real).astype(bool)

    def lookup(self, field: str, *, service: ZipcodeService | None = None) -> pd.Series:
        """Look up a record field for each entry.

        Args:
            field: Record field to return, e.g. "city" or "state".
            service: Optional ZipcodeService to use.

        Returns:
            Series with the first matching record's field value, None where
            the code is invalid or unknown.

        Raises:
            ValueError: If ``field`` is not a record field.
        """
        if field not in ZIPCODE_FIELDS:
            raise ValueError(f"Unknown zipcode field: {field}")
        svc = self._get_service(service)

        def _lookup(value: Any) -> Any:
            try:
                record = svc.get(value)
            except ZipcodeError:
                return None
            return getattr(record, field) if record is not None else None

        return self._obj.map(_lookup)


def register_accessor(name: str = "zips") -> None:
    """Register the ZIP code accessor on pandas Series.

    After calling this, you can use:
        >>> series.zips.is_real()

    Args:
        name: Name for the accessor (default: "zips").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(ZipcodeAccessor)


def to_dataframe(zipcodes: Iterable[Zipcode] | None = None) -> pd.DataFrame:
    """Build a DataFrame with one row per record.

    Args:
        zipcodes: Records to convert. Defaults to the whole bundled dataset.

    Returns:
        DataFrame with one column per record field, in ZIPCODE_FIELDS order.
    """
    import pandas as pd

    if zipcodes is None:
        from ryandata_zipcodes.service import list_all

        zipcodes = list_all()

    rows = [z.to_dict() for z in zipcodes]
    return pd.DataFrame(rows, columns=ZIPCODE_FIELDS)
