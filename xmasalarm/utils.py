"""Date helpers for the alarm editor; ``now`` of None means no clock sync yet."""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Optional

from .alarm import Alarm

FALLBACK_YEAR = 2025
EARLIEST_SYNCED_YEAR = 2024


def current_year(now: Optional[datetime]) -> int:
    """Return the year of ``now``, or a fixed fallback when the time is unknown."""
    return now.year if now is not None else FALLBACK_YEAR


def max_day(year: int, month: int) -> int:
    """Return the last day of ``month`` (1-12), rolling out-of-range months into adjacent years."""
    y = year + month // 12
    m = month % 12  # zero-based index of the following month
    # Last day of the requested month is the day before the first of the next one.
    if m == 0:
        y, m = y - 1, 12
    days = calendar.mdays[m]
    if m == 2 and calendar.isleap(y):
        days += 1
    return days


def is_time_available(now: Optional[datetime]) -> bool:
    """Return whether the clock holds a plausible synchronised time."""
    return now is not None and now.year >= EARLIEST_SYNCED_YEAR


def set_alarm_to_current_time(alarm: Alarm, now: Optional[datetime]) -> None:
    """Fill the alarm's time and date with sensible starting values."""
    if now is not None:
        alarm.hour, alarm.minute = 7, 0
        alarm.year, alarm.month, alarm.day = now.year, now.month, now.day
    else:
        alarm.hour, alarm.minute = 9, 9
        alarm.year, alarm.month, alarm.day = 2020, 9, 9