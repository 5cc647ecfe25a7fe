"""Data sources for the ZIP code dataset.

This module provides the lazily loaded bundled dataset and alternative
data source implementations.
"""

from __future__ import annotations

from ryandata_zipcodes.data.base import BaseDataSource
from ryandata_zipcodes.data.bundled import BundledDataSource, get_default_data_source
from ryandata_zipcodes.data.factory import DataSourceFactory
from ryandata_zipcodes.data.file_source import FileDataSource

__all__ = [
    "BaseDataSource",
    "BundledDataSource",
    "DataSourceFactory",
    "FileDataSource",
    "get_default_data_source",
]
