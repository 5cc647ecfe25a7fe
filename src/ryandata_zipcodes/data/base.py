from __future__ import annotations

import bz2
import logging
import threading
import time
from abc import ABC, abstractmethod

from pydantic import TypeAdapter

from ryandata_zipcodes.core.errors import DatasetLoadError
from ryandata_zipcodes.models import Zipcode

logger = logging.getLogger(__name__)

_BZ2_MAGIC = b"BZh"

_RECORDS_ADAPTER: TypeAdapter[tuple[Zipcode, ...]] = TypeAdapter(tuple[Zipcode, ...])


class BaseDataSource(ABC):
    """Abstract base class for ZIP code data sources.

    Loads the dataset lazily and exactly once. Concurrent first calls to
    ``get()`` block on a lock while a single thread decompresses and parses
    the data; every caller then receives the same immutable tuple. Once
    loaded, ``get()`` returns without taking the lock.

    Subclasses only provide the raw bytes and a label for error messages.
    """

    def __init__(self) -> None:
        """Initialize the data source without loading anything."""
        self._records: tuple[Zipcode, ...] | None = None
        self._lock = threading.Lock()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable label of the underlying source."""
        ...

    @abstractmethod
    def _read_bytes(self) -> bytes:
        """Read the raw (possibly bz2-compressed) JSON dataset.

        Returns:
            The dataset bytes.
        """
        ...

    def get(self) -> tuple[Zipcode, ...]:
        """Get the loaded dataset, loading it on first use.

        Returns:
            Immutable, ordered tuple of all records.

        Raises:
            DatasetLoadError: If the dataset cannot be read, decompressed
                or parsed. The source stays unloaded.
        """
        records = self._records
        if records is not None:
            return records

        with self._lock:
            if self._records is None:
                self._records = self._load()
            return self._records

    def _load(self) -> tuple[Zipcode, ...]:
        started = time.perf_counter()
        try:
            raw = self._read_bytes()
            if raw.startswith(_BZ2_MAGIC):
                raw = bz2.decompress(raw)
            records = _RECORDS_ADAPTER.validate_json(raw)
        except Exception as e:
            logger.critical("Failed to load zipcode database from %s: %s", self.name, e)
            raise DatasetLoadError(self.name, e) from e

        logger.info(
            "Loaded %d zipcodes from %s in %.3fs",
            len(records),
            self.name,
            time.perf_counter() - started,
        )
        return records

    @property
    def is_loaded(self) -> bool:
        """Whether the dataset has been loaded."""
        return self._records is not None

    def reset(self) -> None:
        """Drop the loaded dataset so the next ``get()`` reloads it."""
        with self._lock:
            self._records = None

    def __len__(self) -> int:
        return len(self.get())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, loaded={self.is_loaded})"
