from __future__ import annotations

import functools
import logging
from typing import Any, Iterable, Optional, Protocol

from happyhour.db.seed import FIXTURE_VENUES
from happyhour.schemas.venues import Venue

logger = logging.getLogger(__name__)


class DuplicateVenueError(ValueError):
    """Raised when two venues share an id or slug."""


class VenueRepository(Protocol):
    def fetch_all(self) -> list[Venue]:
        ...


class FixtureVenueRepository:
    """Serves an in-memory venue list, validated once on construction."""

    def __init__(self, records: Optional[Iterable[dict[str, Any]]] = None) -> None:
        raw = FIXTURE_VENUES if records is None else list(records)
        venues = [Venue.model_validate(record) for record in raw]
        _ensure_unique(venues)
        self._venues = tuple(venues)
        logger.info(f"Loaded {len(self._venues)} venue(s)")

    def fetch_all(self) -> list[Venue]:
        return list(self._venues)


def _ensure_unique(venues: list[Venue]) -> None:
    seen_ids: set[str] = set()
    seen_slugs: set[str] = set()
    for venue in venues:
        if venue.id in seen_ids:
            raise DuplicateVenueError(f"Duplicate venue id: {venue.id}")
        if venue.slug in seen_slugs:
            raise DuplicateVenueError(f"Duplicate venue slug: {venue.slug}")
        seen_ids.add(venue.id)
        seen_slugs.add(venue.slug)


@functools.lru_cache()
def get_venue_repository() -> VenueRepository:
    return FixtureVenueRepository()


__all__ = [
    "DuplicateVenueError",
    "FixtureVenueRepository",
    "VenueRepository",
    "get_venue_repository",
]
