"""
One-shot viewer location.

The browser asks the device for its position once and reports the outcome
back in the query string. Whatever the outcome, the listing always renders:
a failure or a timeout falls back to the configured default position.
"""
from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from happyhour.services.geospatial import Coordinates

logger = logging.getLogger(__name__)

PENDING_MESSAGE = "Getting your location… (we'll use a default city if blocked)"
TIMEOUT_MESSAGE = "Timeout expired"
UNKNOWN_ERROR_MESSAGE = "Unable to get location"


class LocationError(Exception):
    """The location sensor is unsupported, was denied, or reported an error."""


class LocationStatus(str, Enum):
    SENSED = "sensed"
    PENDING = "pending"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewerLocation:
    coords: Coordinates
    status: LocationStatus
    error: Optional[str] = None

    @property
    def status_message(self) -> Optional[str]:
        if self.status is LocationStatus.FAILED:
            return f"Location error: {self.error}"
        if self.status is LocationStatus.PENDING:
            return PENDING_MESSAGE
        return None


class LocationProvider(Protocol):
    async def current_position(self) -> Optional[Coordinates]:
        """Return the sensed position, None while still unknown, or raise LocationError."""
        ...


class StaticLocationProvider:
    def __init__(self, coords: Coordinates) -> None:
        self._coords = coords

    async def current_position(self) -> Optional[Coordinates]:
        return self._coords


class ReportedLocationProvider:
    """Position (or failure) reported by the browser's one-shot request."""

    def __init__(
        self,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        error: Optional[str] = None,
    ) -> None:
        self.lat = lat
        self.lon = lon
        self.error = error

    @classmethod
    def from_query(
        cls,
        lat: Optional[str],
        lon: Optional[str],
        error: Optional[str],
    ) -> "ReportedLocationProvider":
        """Build from raw query values; unparseable numbers become a reported error."""
        try:
            lat_value = float(lat) if lat not in (None, "") else None
            lon_value = float(lon) if lon not in (None, "") else None
        except ValueError:
            return cls(error=error or "Invalid coordinates")
        return cls(lat=lat_value, lon=lon_value, error=error)

    async def current_position(self) -> Optional[Coordinates]:
        if self.error:
            raise LocationError(self.error.strip()[:200] or UNKNOWN_ERROR_MESSAGE)
        if self.lat is None and self.lon is None:
            return None
        if self.lat is None or self.lon is None:
            raise LocationError("Incomplete coordinates")
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise LocationError("Invalid coordinates")
        if not (-90 <= self.lat <= 90 and -180 <= self.lon <= 180):
            raise LocationError("Coordinates out of range")
        return Coordinates(lat=self.lat, lon=self.lon)


async def resolve_viewer_location(
    provider: LocationProvider,
    *,
    fallback: Coordinates,
    timeout: float,
) -> ViewerLocation:
    """Await the provider once; never raises for location failures."""
    try:
        coords = await asyncio.wait_for(provider.current_position(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Location request timed out after {timeout}s, using fallback")
        return ViewerLocation(coords=fallback, status=LocationStatus.FAILED, error=TIMEOUT_MESSAGE)
    except LocationError as exc:
        logger.info(f"Location unavailable ({exc}), using fallback")
        return ViewerLocation(coords=fallback, status=LocationStatus.FAILED, error=str(exc))

    if coords is None:
        return ViewerLocation(coords=fallback, status=LocationStatus.PENDING)
    return ViewerLocation(coords=coords, status=LocationStatus.SENSED)


__all__ = [
    "LocationError",
    "LocationProvider",
    "LocationStatus",
    "PENDING_MESSAGE",
    "ReportedLocationProvider",
    "StaticLocationProvider",
    "TIMEOUT_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    "ViewerLocation",
    "resolve_viewer_location",
]
