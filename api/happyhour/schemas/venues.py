from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from happyhour.services.geospatial import Coordinates
from happyhour.services.schedule import DAY_KEYS, clock_minutes


class TimeWindow(BaseModel):
    """A happy hour window on one day, as ``HH:MM`` wall-clock strings."""

    model_config = ConfigDict(frozen=True)

    start: str
    end: str

    @model_validator(mode="before")
    @classmethod
    def accept_pairs(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError("A window is a (start, end) pair")
            return {"start": value[0], "end": value[1]}
        return value

    @field_validator("start", "end")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        clock_minutes(v)
        return v

    @property
    def start_minutes(self) -> int:
        return clock_minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return clock_minutes(self.end)

    def label(self) -> str:
        return f"{self.start}–{self.end}"


class WeeklySchedule(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    sun: tuple[TimeWindow, ...] = ()
    mon: tuple[TimeWindow, ...] = ()
    tue: tuple[TimeWindow, ...] = ()
    wed: tuple[TimeWindow, ...] = ()
    thu: tuple[TimeWindow, ...] = ()
    fri: tuple[TimeWindow, ...] = ()
    sat: tuple[TimeWindow, ...] = ()

    def windows_for(self, key: str) -> tuple[TimeWindow, ...]:
        if key not in DAY_KEYS:
            raise KeyError(key)
        return getattr(self, key)


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    hh: float = Field(ge=0, description="Happy hour price")
    reg: Optional[float] = Field(default=None, description="Regular price, if known")

    @property
    def savings(self) -> Optional[float]:
        """Regular minus happy hour price; may be zero or negative."""
        if self.reg is None:
            return None
        return self.reg - self.hh


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str
    lat: float
    lon: float
    cuisines: tuple[str, ...] = ()
    schedule: WeeklySchedule = Field(default_factory=WeeklySchedule)
    items: tuple[Item, ...] = ()
    booking_url: Optional[str] = None

    @property
    def position(self) -> Coordinates:
        return Coordinates(lat=self.lat, lon=self.lon)


__all__ = ["Item", "TimeWindow", "Venue", "WeeklySchedule"]
