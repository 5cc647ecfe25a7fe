from __future__ import annotations

from importlib import resources

from ryandata_zipcodes.data.base import BaseDataSource

BUNDLED_PACKAGE = "ryandata_zipcodes.data"
BUNDLED_FILENAME = "zips.json.bz2"


class BundledDataSource(BaseDataSource):
    """Data source backed by the zips.json.bz2 file shipped with the package."""

    @property
    def name(self) -> str:
        return f"{BUNDLED_PACKAGE}/{BUNDLED_FILENAME}"

    def _read_bytes(self) -> bytes:
        return resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_FILENAME).read_bytes()


_default_source = BundledDataSource()


def get_default_data_source() -> BundledDataSource:
    """Get the process-wide bundled data source.

    The instance is created at import time but loads nothing until its
    first ``get()``.

    Returns:
        Shared BundledDataSource instance.
    """
    return _default_source
