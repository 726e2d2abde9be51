from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from happyhour.services.listing import ViewRow
from happyhour.services.pricing import format_money

MAX_CARD_ITEMS = 3

HAPPENING_NOW = "Happening now"
NO_WINDOW_TODAY = "No window today"
EMPTY_STATE_MESSAGE = "No results nearby."


@dataclass(frozen=True)
class ItemLine:
    name: str
    price: str
    was_price: Optional[str]


@dataclass(frozen=True)
class VenueCard:
    """Display-ready strings for one venue; the template only lays them out."""

    id: str
    name: str
    meta_line: str
    savings_badge: Optional[str]
    status_line: str
    active: bool
    items: tuple[ItemLine, ...]
    booking_url: Optional[str]


def status_line(row: ViewRow) -> str:
    if row.active:
        return HAPPENING_NOW
    if row.next_window is not None:
        return f"Next: {row.next_window.label()}"
    return NO_WINDOW_TODAY


def build_card(row: ViewRow) -> VenueCard:
    venue = row.venue
    items = tuple(
        ItemLine(
            name=item.name,
            price=format_money(item.hh),
            was_price=format_money(item.reg) if item.reg is not None else None,
        )
        for item in venue.items[:MAX_CARD_ITEMS]
    )
    return VenueCard(
        id=venue.id,
        name=venue.name,
        meta_line=f"{row.distance_km:.2f} km • {', '.join(venue.cuisines)}",
        savings_badge=f"Save up to {format_money(row.top_savings)}" if row.top_savings > 0 else None,
        status_line=status_line(row),
        active=row.active,
        items=items,
        booking_url=venue.booking_url,
    )


def build_cards(rows: list[ViewRow]) -> list[VenueCard]:
    return [build_card(row) for row in rows]


__all__ = [
    "EMPTY_STATE_MESSAGE",
    "HAPPENING_NOW",
    "ItemLine",
    "MAX_CARD_ITEMS",
    "NO_WINDOW_TODAY",
    "VenueCard",
    "build_card",
    "build_cards",
    "status_line",
]
