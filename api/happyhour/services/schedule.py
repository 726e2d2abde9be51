"""Happy hour window evaluation against a wall-clock instant."""
from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from happyhour.schemas.venues import TimeWindow, WeeklySchedule

# Index 0 is Sunday, matching the order schedules are keyed in.
DAY_KEYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

_CLOCK_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def clock_minutes(value: str) -> int:
    """
    Convert an ``HH:MM`` wall-clock string to minutes since midnight.

    Raises:
        ValueError: if the string is not a zero-padded 24h time.

    Examples:
        >>> clock_minutes("15:30")
        930
    """
    match = _CLOCK_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Expected an HH:MM time, got {value!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def day_key(now: datetime) -> str:
    # datetime.weekday() counts from Monday
    return DAY_KEYS[(now.weekday() + 1) % 7]


def _current_minutes(now: datetime) -> int:
    return now.hour * 60 + now.minute


def is_active_now(schedule: WeeklySchedule, now: datetime) -> bool:
    """Return True if ``now`` falls inside one of today's windows, bounds included."""
    current = _current_minutes(now)
    return any(
        window.start_minutes <= current <= window.end_minutes
        for window in schedule.windows_for(day_key(now))
    )


def next_window_today(schedule: WeeklySchedule, now: datetime) -> Optional[TimeWindow]:
    """
    Return the earliest-starting window today that has not ended yet.

    A window already in progress counts as "next"; callers check
    ``is_active_now`` separately.
    """
    current = _current_minutes(now)
    windows = sorted(schedule.windows_for(day_key(now)), key=lambda w: w.start_minutes)
    for window in windows:
        if current <= window.end_minutes:
            return window
    return None


__all__ = ["DAY_KEYS", "clock_minutes", "day_key", "is_active_now", "next_window_today"]
