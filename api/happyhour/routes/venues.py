from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from happyhour.core.clock import get_now
from happyhour.core.config import get_settings
from happyhour.db.repository import VenueRepository, get_venue_repository
from happyhour.schemas.listing import VenueListResponse, VenueRowSchema, ViewerSchema
from happyhour.services.geospatial import Coordinates
from happyhour.services.listing import SEARCH_RADIUS_KM, rank_venues
from happyhour.services.location import ReportedLocationProvider, resolve_viewer_location

router = APIRouter(prefix="/venues", tags=["venues"])
settings = get_settings()


@router.get("")
async def venues_nearby(
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
    repository: VenueRepository = Depends(get_venue_repository),
    now: datetime = Depends(get_now),
) -> VenueListResponse:
    if (lat is None) != (lon is None):
        raise HTTPException(status_code=400, detail="lat and lon must be provided together")

    location = await resolve_viewer_location(
        ReportedLocationProvider(lat=lat, lon=lon),
        fallback=Coordinates(lat=settings.fallback_lat, lon=settings.fallback_lon),
        timeout=settings.location_timeout_seconds,
    )
    rows = rank_venues(repository.fetch_all(), location.coords, now)
    return VenueListResponse(
        viewer=ViewerSchema.from_location(location),
        radius_km=SEARCH_RADIUS_KM,
        items=[VenueRowSchema.from_row(row) for row in rows],
    )
