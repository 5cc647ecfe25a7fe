"""ZIP code query service.

ZipcodeService validates caller input and searches either a data source or a
caller-supplied override collection. The module-level functions delegate to
a shared service backed by the bundled dataset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from ryandata_zipcodes.core.zip_normalizer import ZipCodeNormalizer, get_zip_normalizer
from ryandata_zipcodes.data import get_default_data_source
from ryandata_zipcodes.models import Zipcode
from ryandata_zipcodes.protocols import DataSourceProtocol

if TYPE_CHECKING:
    from abstract_validation_base import CompositeValidator, ValidationResult

logger = logging.getLogger(__name__)

Predicate = Callable[[Zipcode], bool]


class ZipcodeService:
    """Validation, lookup and filtering over a ZIP code dataset.

    Example:
        >>> service = ZipcodeService()
        >>> service.is_real("06902")
        True
        >>> [z.city for z in service.matching("77429-1234")]
        ['Cypress']
    """

    def __init__(
        self,
        data_source: DataSourceProtocol | None = None,
        normalizer: ZipCodeNormalizer | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            data_source: Data source to search. Defaults to the shared
                bundled dataset.
            normalizer: ZIP code normalizer. Defaults to the shared one.
        """
        self._data_source = data_source if data_source is not None else get_default_data_source()
        self._normalizer = normalizer if normalizer is not None else get_zip_normalizer()
        self._validator: CompositeValidator[str] | None = None

    @property
    def data_source(self) -> DataSourceProtocol:
        """The data source searched when no override is given."""
        return self._data_source

    def _scope(self, zipcodes: Iterable[Zipcode] | None) -> Iterable[Zipcode]:
        return self._data_source.get() if zipcodes is None else zipcodes

    def normalize(self, code: str) -> str:
        """Normalize a ZIP code to its 5-digit form.

        Raises:
            InvalidFormat: If the input is too short.
            InvalidCharacters: If the first five characters are not digits.
        """
        return self._normalizer.clean(code)

    def matching(self, code: str, zipcodes: Iterable[Zipcode] | None = None) -> list[Zipcode]:
        """Find every record with the given ZIP code.

        Args:
            code: ZIP code ("#####", "#####-####" or "##### ####").
            zipcodes: Records to search instead of the data source.

        Returns:
            Matching records in source order; empty if none match.

        Raises:
            InvalidFormat: If the input is too short.
            InvalidCharacters: If the first five characters are not digits.
        """
        zip5 = self._normalizer.clean(code)
        matches = [z for z in self._scope(zipcodes) if z.zip_code == zip5]
        logger.debug("matching %s matched %d zipcodes", zip5, len(matches))
        return matches

    def is_real(self, code: str) -> bool:
        """Check whether a ZIP code exists in the data source.

        Raises:
            InvalidFormat: If the input is too short.
            InvalidCharacters: If the first five characters are not digits.
        """
        zip5 = self._normalizer.clean(code)
        return bool(self.matching(zip5))

    def get(self, code: str) -> Zipcode | None:
        """Get the first record for a ZIP code, or None if it does not exist.

        Raises:
            InvalidFormat: If the input is too short.
            InvalidCharacters: If the first five characters are not digits.
        """
        matches = self.matching(code)
        return matches[0] if matches else None

    def filter_by(
        self,
        predicates: Sequence[Predicate],
        zipcodes: Iterable[Zipcode] | None = None,
    ) -> list[Zipcode]:
        """Find every record satisfying all predicates.

        Predicates are checked in order and evaluation stops at the first one
        that fails for a record. An empty predicate list returns every record.

        Args:
            predicates: Callables taking a Zipcode and returning a bool.
            zipcodes: Records to search instead of the data source.

        Returns:
            Matching records in source order.
        """
        predicates = list(predicates)
        matches = [z for z in self._scope(zipcodes) if all(p(z) for p in predicates)]
        logger.debug(
            "filter_by with %d predicates matched %d zipcodes", len(predicates), len(matches)
        )
        return matches

    def list_all(self) -> list[Zipcode]:
        """Get a copy of every record in the data source.

        The returned list is the caller's; changing it does not affect the
        shared dataset.
        """
        return list(self._data_source.get())

    def validate(self, code: str) -> ValidationResult:
        """Validate a ZIP code without raising.

        Checks the format and, for well-formed codes, that the code exists.

        Args:
            code: ZIP code to validate.

        Returns:
            ValidationResult with any format or existence errors.
        """
        if self._validator is None:
            from ryandata_zipcodes.validation import create_default_validators

            self._validator = create_default_validators(self)
        return self._validator.validate(code)


_default_service: ZipcodeService | None = None


def get_default_service() -> ZipcodeService:
    """Get the default ZipcodeService singleton.

    Returns:
        Shared ZipcodeService backed by the bundled dataset.
    """
    global _default_service
    if _default_service is None:
        _default_service = ZipcodeService()
    return _default_service


def matching(code: str, zipcodes: Iterable[Zipcode] | None = None) -> list[Zipcode]:
    """Find every record with the given ZIP code.

    Args:
        code: ZIP code ("#####", "#####-####" or "##### ####").
        zipcodes: Records to search instead of the bundled dataset.

    Returns:
        Matching records in dataset order; empty if none match.

    Raises:
        InvalidFormat: If the input is too short.
        InvalidCharacters: If the first five characters are not digits.
    """
    return get_default_service().matching(code, zipcodes)


def is_real(code: str) -> bool:
    """Check whether a ZIP code exists in the bundled dataset.

    Raises:
        InvalidFormat: If the input is too short.
        InvalidCharacters: If the first five characters are not digits.
    """
    return get_default_service().is_real(code)


def filter_by(
    predicates: Sequence[Predicate],
    zipcodes: Iterable[Zipcode] | None = None,
) -> list[Zipcode]:
    """Find every record satisfying all predicates.

    Args:
        predicates: Callables taking a Zipcode and returning a bool.
        zipcodes: Records to search instead of the bundled dataset.

    Returns:
        Matching records in dataset order.
    """
    return get_default_service().filter_by(predicates, zipcodes)


def list_all() -> list[Zipcode]:
    """Get a copy of every record in the bundled dataset."""
    return get_default_service().list_all()
