from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from happyhour.schemas.venues import TimeWindow, Venue
from happyhour.services.geospatial import Coordinates, distance_km
from happyhour.services.pricing import top_savings
from happyhour.services.schedule import is_active_now, next_window_today

logger = logging.getLogger(__name__)

# Wide enough that the fixture venues show up on a first visit.
SEARCH_RADIUS_KM = 30.0


@dataclass(frozen=True)
class ViewRow:
    venue: Venue
    active: bool
    next_window: Optional[TimeWindow]
    distance_km: float
    top_savings: float


def build_row(venue: Venue, origin: Coordinates, now: datetime) -> ViewRow:
    return ViewRow(
        venue=venue,
        active=is_active_now(venue.schedule, now),
        next_window=next_window_today(venue.schedule, now),
        distance_km=distance_km(origin, venue.position),
        top_savings=top_savings(venue.items),
    )


def rank_venues(venues: Iterable[Venue], origin: Coordinates, now: datetime) -> list[ViewRow]:
    """Build rows for venues within the search radius, nearest first.

    The sort is stable, so venues at the same distance keep dataset order.
    """
    rows = [build_row(venue, origin, now) for venue in venues]
    nearby = [row for row in rows if row.distance_km <= SEARCH_RADIUS_KM]
    nearby.sort(key=lambda row: row.distance_km)
    logger.debug(
        f"Ranked {len(nearby)} of {len(rows)} venue(s) within {SEARCH_RADIUS_KM:.0f} km "
        f"of ({origin.lat}, {origin.lon})"
    )
    return nearby


__all__ = ["SEARCH_RADIUS_KM", "ViewRow", "build_row", "rank_venues"]
