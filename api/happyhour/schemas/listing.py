from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from happyhour.services.listing import ViewRow
from happyhour.services.location import ViewerLocation


class ItemSchema(BaseModel):
    name: str
    hh: float
    reg: Optional[float]


class WindowSchema(BaseModel):
    start: str
    end: str


class VenueRowSchema(BaseModel):
    id: str
    name: str
    slug: str
    cuisines: list[str]
    distance_km: float
    active: bool
    next_window: Optional[WindowSchema]
    top_savings: float = Field(ge=0)
    items: list[ItemSchema]
    booking_url: Optional[str]

    @classmethod
    def from_row(cls, row: ViewRow) -> "VenueRowSchema":
        venue = row.venue
        return cls(
            id=venue.id,
            name=venue.name,
            slug=venue.slug,
            cuisines=list(venue.cuisines),
            distance_km=row.distance_km,
            active=row.active,
            next_window=(
                WindowSchema(start=row.next_window.start, end=row.next_window.end)
                if row.next_window is not None
                else None
            ),
            top_savings=row.top_savings,
            items=[ItemSchema(name=i.name, hh=i.hh, reg=i.reg) for i in venue.items],
            booking_url=venue.booking_url,
        )


class ViewerSchema(BaseModel):
    lat: float
    lon: float
    status: str
    message: Optional[str]

    @classmethod
    def from_location(cls, location: ViewerLocation) -> "ViewerSchema":
        return cls(
            lat=location.coords.lat,
            lon=location.coords.lon,
            status=location.status.value,
            message=location.status_message,
        )


class VenueListResponse(BaseModel):
    viewer: ViewerSchema
    radius_km: float
    items: list[VenueRowSchema]


__all__ = [
    "ItemSchema",
    "VenueListResponse",
    "VenueRowSchema",
    "ViewerSchema",
    "WindowSchema",
]
