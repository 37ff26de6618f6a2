import math
import pandas as pd
from datetime import datetime, timedelta, timezone
from typing import Any


def ensure_utc(value: Any) -> Any:
    """
    Convert a timestamp-like input to a timezone-aware UTC datetime.

    Naive datetimes are taken to already be in UTC. Strings and pandas
    Timestamps are parsed with pandas. ``None`` passes through untouched so the
    helper can be used on optional fields.
    """
    if value is None:
        return None
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    elif isinstance(value, str):
        try:
            value = pd.to_datetime(value, errors="raise").to_pydatetime()
        except Exception as e:
            raise ValueError(f"Could not parse timestamp '{value}': {e}")
    if not isinstance(value, datetime):
        raise ValueError(f"Unsupported timestamp type: {type(value)}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hours_between(start: datetime, end: datetime) -> float:
    """Length of [start, end) in hours (negative if end precedes start)."""
    return (end - start).total_seconds() / 3600


def intervals_overlap(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    """Half-open interval intersection; touching endpoints do not overlap."""
    return a_start < b_end and a_end > b_start


def shift_window(
    start: datetime, end: datetime, new_start: datetime
) -> tuple[datetime, datetime]:
    """Move a window so it begins at new_start, keeping its duration."""
    return new_start, new_start + (end - start)


def snap_to_grid(value: datetime, minutes: int) -> datetime:
    """Round a timestamp to the nearest multiple of `minutes` past the hour."""
    if minutes <= 0:
        return value
    step = timedelta(minutes=minutes)
    floored = value.replace(second=0, microsecond=0) - timedelta(
        minutes=value.minute % minutes
    )
    remainder = value - floored
    return floored + step if remainder * 2 >= step else floored


def round_half_up(value: float) -> int:
    """Round halves towards positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))
