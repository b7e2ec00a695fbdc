from datetime import datetime, timedelta, tzinfo
from typing import Optional

TIME_FORMAT = "%b %d, %Y %I:%M %p"

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

# Largest unit first.
_UNITS = (
    (YEAR, "y"),
    (MONTH, "mo"),
    (WEEK, "w"),
    (DAY, "d"),
    (HOUR, "h"),
    (MINUTE, "min"),
)


def format_age(elapsed: timedelta) -> str:
    """Compact age: 42s, 5min, 3h, 2d, 1w, 4mo, 2y. Negative spans read as 0s."""
    sec = max(0, int(elapsed.total_seconds()))
    for size, suffix in _UNITS:
        if sec >= size:
            return f"{sec // size}{suffix}"
    return f"{sec}s"


def age_of(created_at: datetime, now: datetime) -> str:
    return format_age(now - created_at)


def convert_utc_to_local(utc_time: datetime, time_format: str = TIME_FORMAT, tz: Optional[tzinfo] = None) -> str:
    """Render an aware datetime in local time (or in `tz` when given)."""
    local_time = utc_time.astimezone(tz) if tz is not None else utc_time.astimezone()
    return local_time.strftime(time_format)


__all__ = ["TIME_FORMAT", "format_age", "age_of", "convert_utc_to_local"]
