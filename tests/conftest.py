"""Shared pytest fixtures for geovet tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock, Mock

import pytest

from geovet.providers.local import ReaderRegistry
from geovet.settings import LookupSettings

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove geovet and ipinfo variables so host configuration never leaks in."""
    for key in list(os.environ):
        if key.startswith("GEOVET_") or key == "IPINFO_TOKEN":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty GeoLite2 data directory."""
    path = tmp_path / "geovet"
    path.mkdir()
    return path


@pytest.fixture
def populated_data_dir(data_dir: Path) -> Path:
    """Data directory holding placeholder City and ASN files (readers are mocked)."""
    (data_dir / "GeoLite2-City.mmdb").touch()
    (data_dir / "GeoLite2-ASN.mmdb").touch()
    return data_dir


@pytest.fixture
def registry() -> Generator[ReaderRegistry, None, None]:
    """Reader registry closed after each test."""
    reg = ReaderRegistry()
    yield reg
    reg.close()


@pytest.fixture
def local_settings(data_dir: Path) -> LookupSettings:
    """Settings pointing the local provider at the temporary data directory."""
    return LookupSettings(data_dir=data_dir)


# ============================================================================
# GeoLite2 Response Fixtures
# ============================================================================


@pytest.fixture
def mock_city_response() -> Mock:
    """Mock City database response for 8.8.8.8."""
    response = Mock()
    response.country.iso_code = "US"
    response.country.name = "United States"
    subdivision = Mock()
    subdivision.name = "California"
    response.subdivisions = (subdivision,)
    response.city.name = "Mountain View"
    response.location.latitude = 37.386
    response.location.longitude = -122.0838
    response.location.time_zone = "America/Los_Angeles"
    response.postal.code = "94035"
    return response


@pytest.fixture
def mock_asn_response() -> Mock:
    """Mock ASN database response for 8.8.8.8."""
    response = Mock()
    response.autonomous_system_number = 15169
    response.autonomous_system_organization = "GOOGLE"
    return response


# ============================================================================
# HTTP Fixtures
# ============================================================================


def _make_response(status_code: int = 200, json_data: object = None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory for mock ``requests.Response`` objects."""
    return _make_response


@pytest.fixture
def mock_session() -> MagicMock:
    """Mock ``requests.Session``; tests set ``get.return_value`` or ``get.side_effect``."""
    return MagicMock()
