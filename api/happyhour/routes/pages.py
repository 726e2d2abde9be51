from __future__ import annotations

import math
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from happyhour.core.clock import get_now
from happyhour.core.config import get_settings
from happyhour.db.repository import VenueRepository, get_venue_repository
from happyhour.services.geospatial import Coordinates
from happyhour.services.listing import rank_venues
from happyhour.services.location import LocationStatus, ReportedLocationProvider, resolve_viewer_location
from happyhour.services.presentation import EMPTY_STATE_MESSAGE, build_cards

router = APIRouter(tags=["pages"])
settings = get_settings()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def listing_page(
    request: Request,
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    location_error: Optional[str] = Query(None),
    repository: VenueRepository = Depends(get_venue_repository),
    now: datetime = Depends(get_now),
) -> HTMLResponse:
    # Coordinates arrive as raw strings so a bad value degrades to the fallback instead of a 422.
    provider = ReportedLocationProvider.from_query(lat, lon, location_error)
    location = await resolve_viewer_location(
        provider,
        fallback=Coordinates(lat=settings.fallback_lat, lon=settings.fallback_lon),
        timeout=settings.location_timeout_seconds,
    )
    rows = rank_venues(repository.fetch_all(), location.coords, now)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_name,
            "cards": build_cards(rows),
            "empty_message": EMPTY_STATE_MESSAGE,
            "location_message": location.status_message,
            "location_pending": location.status is LocationStatus.PENDING,
            "location_timeout_ms": int(math.ceil(settings.location_timeout_seconds * 1000)),
        },
    )
