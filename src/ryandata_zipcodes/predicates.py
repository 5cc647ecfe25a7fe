"""Predicate builders for ``filter_by``.

Each builder returns a plain ``Zipcode -> bool`` callable, so they mix freely
with lambdas:

    >>> from ryandata_zipcodes import filter_by
    >>> from ryandata_zipcodes.predicates import in_state, is_active
    >>> filter_by([in_state("TX"), is_active(), lambda z: z.city == "Austin"])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from ryandata_zipcodes.models import ZIPCODE_FIELDS, Zipcode, ZipCodeType

Predicate = Callable[[Zipcode], bool]


def _check_field(field: str) -> None:
    if field not in ZIPCODE_FIELDS:
        available = ", ".join(ZIPCODE_FIELDS)
        raise ValueError(f"Unknown zipcode field: {field}. Available fields: {available}")


def field_equals(field: str, value: Any, *, case_sensitive: bool = True) -> Predicate:
    """Match records whose ``field`` equals ``value``.

    Args:
        field: Record field name, e.g. "city".
        value: Value to compare against.
        case_sensitive: If False, compare string values case-insensitively.

    Returns:
        Predicate over Zipcode records.

    Raises:
        ValueError: If ``field`` is not a record field.
    """
    _check_field(field)
    if not case_sensitive and isinstance(value, str):
        folded = value.casefold()

        def _equals_folded(zipcode: Zipcode) -> bool:
            actual = getattr(zipcode, field)
            return isinstance(actual, str) and actual.casefold() == folded

        return _equals_folded

    def _equals(zipcode: Zipcode) -> bool:
        return getattr(zipcode, field) == value

    return _equals


def field_in(field: str, values: Iterable[Any]) -> Predicate:
    """Match records whose ``field`` is one of ``values``.

    Raises:
        ValueError: If ``field`` is not a record field.
    """
    _check_field(field)
    allowed = frozenset(values)

    def _member(zipcode: Zipcode) -> bool:
        return getattr(zipcode, field) in allowed

    return _member


def is_active() -> Predicate:
    """Match active ZIP codes."""
    return lambda zipcode: zipcode.active


def in_state(state: str) -> Predicate:
    """Match records in the given state abbreviation (case-insensitive)."""
    return field_equals("state", state.strip().upper())


def of_type(zip_code_type: ZipCodeType | str) -> Predicate:
    """Match records with the given classification, e.g. ``ZipCodeType.PO_BOX``."""
    tag = ZipCodeType(zip_code_type).value
    return field_equals("zip_code_type", tag)


def has_area_code(area_code: str) -> Predicate:
    """Match records served by the given telephone area code."""
    return lambda zipcode: area_code in zipcode.area_codes
