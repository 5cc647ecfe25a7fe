"""ryandata-zipcodes: US ZIP code validation and lookup over a bundled dataset.

This package provides:
- Validation of "#####", "#####-####" and "##### ####" style ZIP codes
- Exact-match lookup against a bundled, lazily loaded dataset
- Predicate-based filtering, over the dataset or a caller-supplied subset
- Non-raising validators and Pandas integration

Quick Start:
    >>> from ryandata_zipcodes import is_real, matching, filter_by
    >>> is_real("06902")
    True
    >>> matching("77429-1234")[0].city
    'Cypress'

    # Filter with any Zipcode -> bool callables
    >>> from ryandata_zipcodes.predicates import in_state, is_active
    >>> texas = filter_by([in_state("TX"), is_active()])

    # Search a subset instead of the whole dataset
    >>> matching("77429", texas)

    # Bad input raises a typed error
    >>> from ryandata_zipcodes import InvalidCharacters
    >>> try:
    ...     matching("7742x")
    ... except InvalidCharacters as e:
    ...     print(e.type)
    invalid_characters
"""

from __future__ import annotations  # noqa: I001

from ryandata_zipcodes.core import (
    PACKAGE_NAME,
    DatasetLoadError,
    InvalidCharacters,
    InvalidFormat,
    ZipCodeNormalizer,
    ZipcodeError,
    get_zip_normalizer,
    normalize_and_validate,
)
from ryandata_zipcodes.models import ZIPCODE_FIELDS, ZipCodeType, Zipcode, ZipcodeField
from ryandata_zipcodes.data import (
    BaseDataSource,
    BundledDataSource,
    DataSourceFactory,
    FileDataSource,
    get_default_data_source,
)
from ryandata_zipcodes.protocols import DataSourceProtocol
from ryandata_zipcodes.service import (
    ZipcodeService,
    filter_by,
    get_default_service,
    is_real,
    list_all,
    matching,
)
from ryandata_zipcodes import predicates
from ryandata_zipcodes.pandas_ext import register_accessor, to_dataframe

__version__ = "0.1.0"
__package_name__ = "ryandata-zipcodes"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "matching",
    "is_real",
    "filter_by",
    "list_all",
    "normalize_and_validate",
    "ZipcodeService",
    "get_default_service",
    # Models
    "Zipcode",
    "ZipCodeType",
    "ZipcodeField",
    "ZIPCODE_FIELDS",
    # Errors
    "PACKAGE_NAME",
    "ZipcodeError",
    "InvalidFormat",
    "InvalidCharacters",
    "DatasetLoadError",
    # Normalization
    "ZipCodeNormalizer",
    "get_zip_normalizer",
    # Data sources
    "DataSourceProtocol",
    "BaseDataSource",
    "BundledDataSource",
    "FileDataSource",
    "DataSourceFactory",
    "get_default_data_source",
    # Predicates
    "predicates",
    # Pandas integration
    "register_accessor",
    "to_dataframe",
]
