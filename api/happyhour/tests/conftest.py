"""Test fixtures and configuration for the happy hour listing tests."""
from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime
from typing import Any, Callable

import pytest
import pytz


def pytest_configure(config):
    """Set up environment variables before any test imports happen."""
    os.environ["ENVIRONMENT"] = "development"
    os.environ["FALLBACK_LAT"] = "37.79"
    os.environ["FALLBACK_LON"] = "-122.4"
    os.environ["TIMEZONE"] = "America/Los_Angeles"
    os.environ["LOCATION_TIMEOUT_SECONDS"] = "8"
    os.environ["CORS_ORIGINS"] = "http://localhost:8000"

    try:
        from happyhour.core.config import get_settings
        get_settings.cache_clear()
    except ImportError:
        pass


from fastapi.testclient import TestClient

from happyhour.schemas.venues import Venue

LA_TZ = pytz.timezone("America/Los_Angeles")

JUNIPER_POSITION = (37.79, -122.4)


def local_time(year: int, month: int, day: int, hour: int, minute: int = 0) -> datetime:
    """An aware datetime on the venues' wall clock."""
    return LA_TZ.localize(datetime(year, month, day, hour, minute))


@pytest.fixture
def fixed_now() -> datetime:
    """Monday 2024-01-01, 16:00 local time."""
    return local_time(2024, 1, 1, 16, 0)


@pytest.fixture
def make_venue() -> Callable[..., Venue]:
    """Factory for venues with sensible defaults."""

    def _make(**overrides: Any) -> Venue:
        record: dict[str, Any] = {
            "id": "test-venue",
            "name": "Test Venue",
            "slug": "test-venue",
            "lat": 37.79,
            "lon": -122.4,
            "cuisines": ["bar"],
            "schedule": {},
            "items": [],
            "booking_url": None,
        }
        record.update(overrides)
        return Venue.model_validate(record)

    return _make


@pytest.fixture
def client(fixed_now) -> Iterator[TestClient]:
    """Create a test client with the clock pinned to ``fixed_now``."""
    from happyhour.core.clock import get_now
    from happyhour.core.config import get_settings
    get_settings.cache_clear()

    from happyhour.main import app

    app.dependency_overrides[get_now] = lambda: fixed_now
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def test_settings():
    """Get test settings."""
    from happyhour.core.config import get_settings
    get_settings.cache_clear()
    return get_settings()
