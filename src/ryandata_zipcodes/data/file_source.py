from __future__ import annotations

from pathlib import Path
from typing import Union

from ryandata_zipcodes.data.base import BaseDataSource


class FileDataSource(BaseDataSource):
    """Data source that loads from a JSON file on disk.

    The file holds a JSON list of records in the same shape as the bundled
    dataset, either plain (``.json``) or bz2-compressed (``.json.bz2``).
    Compression is detected from the file contents, not the extension.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialize file data source.

        Args:
            path: Path to the dataset file.
        """
        self._path = Path(path)
        super().__init__()

    @property
    def path(self) -> Path:
        """Path to the dataset file."""
        return self._path

    @property
    def name(self) -> str:
        return str(self._path)

    def _read_bytes(self) -> bytes:
        return self._path.read_bytes()
