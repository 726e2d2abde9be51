"""Fixture venues served until a real venue source exists."""
from __future__ import annotations

from typing import Any

FIXTURE_VENUES: list[dict[str, Any]] = [
    {
        "id": "juniper",
        "name": "Juniper",
        "slug": "juniper",
        "lat": 37.79,
        "lon": -122.4,
        "cuisines": ["american", "cocktail"],
        "booking_url": "https://www.opentable.com/r/juniper",
        "schedule": {
            "mon": [("15:00", "18:00"), ("21:00", "23:00")],
            "tue": [("15:00", "18:00")],
            "wed": [("15:00", "18:00")],
            "thu": [("15:00", "18:00")],
            "fri": [],
            "sat": [],
            "sun": [("14:00", "17:00")],
        },
        "items": [
            {"name": "House Lager (pint)", "hh": 5, "reg": 8},
            {"name": "Margarita", "hh": 9, "reg": 14},
            {"name": "Wings (6 pc)", "hh": 7, "reg": 12},
        ],
    },
    {
        "id": "harbor-vine",
        "name": "Harbor & Vine",
        "slug": "harbor-and-vine",
        "lat": 37.802,
        "lon": -122.41,
        "cuisines": ["seafood", "wine bar"],
        "booking_url": "https://www.opentable.com/r/harbor-vine",
        "schedule": {
            "mon": [],
            "tue": [("16:00", "18:30")],
            "wed": [("16:00", "18:30")],
            "thu": [("16:00", "18:30")],
            "fri": [("16:00", "18:00")],
            "sat": [],
            "sun": [],
        },
        "items": [
            {"name": "Oysters (half-dozen)", "hh": 16, "reg": 24},
            {"name": "House White (glass)", "hh": 8, "reg": 13},
            {"name": "Calamari", "hh": 10, "reg": 15},
        ],
    },
]


__all__ = ["FIXTURE_VENUES"]
