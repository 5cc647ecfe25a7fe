"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import bz2
import json
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Verbosity, settings

from ryandata_zipcodes import Zipcode, ZipcodeService
from ryandata_zipcodes.data import BaseDataSource, FileDataSource

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


def make_record(zip_code: str, **overrides: Any) -> dict[str, Any]:
    """Build a raw record dict in the bundled dataset's shape."""
    record: dict[str, Any] = {
        "acceptable_cities": [],
        "active": True,
        "area_codes": ["555"],
        "city": "Springfield",
        "country": "US",
        "county": "Greene County",
        "lat": "37.2090",
        "long": "-93.2923",
        "state": "MO",
        "timezone": "America/Chicago",
        "unacceptable_cities": [],
        "world_region": "NA",
        "zip_code": zip_code,
        "zip_code_type": "STANDARD",
    }
    record.update(overrides)
    return record


SAMPLE_RECORDS: list[dict[str, Any]] = [
    make_record("65801", zip_code_type="PO BOX"),
    make_record("65802"),
    make_record("62701", state="IL", county="Sangamon County", area_codes=["217", "447"]),
    make_record("65802", active=False, city="Galloway"),
    make_record("97477", state="OR", county="Lane County", timezone="America/Los_Angeles"),
]


class StaticDataSource(BaseDataSource):
    """In-memory data source serving fixed bytes, counting reads."""

    def __init__(self, payload: bytes, label: str = "static") -> None:
        self._payload = payload
        self._label = label
        self.reads = 0
        super().__init__()

    @property
    def name(self) -> str:
        return self._label

    def _read_bytes(self) -> bytes:
        self.reads += 1
        return self._payload


@pytest.fixture
def sample_zipcodes() -> list[Zipcode]:
    """Sample records as models, independent of the bundled dataset."""
    return [Zipcode.model_validate(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def sample_json_path(tmp_path: Path) -> Path:
    """Plain JSON dataset file holding SAMPLE_RECORDS."""
    path = tmp_path / "zips.json"
    path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def sample_bz2_path(tmp_path: Path) -> Path:
    """bz2-compressed JSON dataset file holding SAMPLE_RECORDS."""
    path = tmp_path / "zips.json.bz2"
    path.write_bytes(bz2.compress(json.dumps(SAMPLE_RECORDS).encode("utf-8")))
    return path


@pytest.fixture
def sample_service(sample_bz2_path: Path) -> ZipcodeService:
    """ZipcodeService backed by the sample dataset file."""
    return ZipcodeService(FileDataSource(sample_bz2_path))


@pytest.fixture
def service() -> ZipcodeService:
    """ZipcodeService backed by the bundled dataset."""
    return ZipcodeService()
