from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ryandata_zipcodes.models import Zipcode


@runtime_checkable
class DataSourceProtocol(Protocol):
    """Protocol for ZIP code data sources.

    Implementations load the dataset once and hand out the same immutable
    tuple of records on every call.
    """

    @property
    def name(self) -> str:
        """Human-readable label of the underlying source."""
        ...

    def get(self) -> tuple[Zipcode, ...]:
        """Get the full dataset, loading it on first use.

        Returns:
            Immutable, ordered tuple of records.
        """
        ...
