"""Alarm records and the rules for which of their fields can be edited."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .config import SCREEN_ALARM_VERSION


class AlarmType(IntEnum):
    """How an alarm decides on which days it rings."""

    ONE_TIME = 0
    SPECIFIC_DATE = 1
    REPEATED = 2


class AlarmField(IntEnum):
    """Editable fields of an alarm, in the order the editor steps through them."""

    TYPE = 0
    TIME_HOUR = 1
    TIME_MIN = 2
    DATE_YEAR = 3
    DATE_MONTH = 4
    DATE_DAY = 5
    REPEAT_DAYS = 6
    ENABLED = 7
    MELODY = 8
    SAVE_EXIT = 9


_DATE_FIELDS = frozenset({AlarmField.DATE_YEAR, AlarmField.DATE_MONTH, AlarmField.DATE_DAY})


@dataclass
class Alarm:
    """One alarm; repeat_days runs Monday to Sunday."""

    enabled: bool = False
    version: int = SCREEN_ALARM_VERSION
    alarm_type: AlarmType = AlarmType.ONE_TIME
    hour: int = 0
    minute: int = 0
    year: int = 0
    month: int = 0
    day: int = 0
    repeat_days: list[bool] = field(default_factory=lambda: [False] * 7)
    melody: int = 0
    name: str = ""


def is_field_visible(alarm_type: AlarmType, field: AlarmField) -> bool:
    """Return whether ``field`` applies to an alarm of ``alarm_type``."""
    if field in _DATE_FIELDS and alarm_type != AlarmType.SPECIFIC_DATE:
        return False
    if field == AlarmField.REPEAT_DAYS and alarm_type != AlarmType.REPEATED:
        return False
    return True


def default_alarm() -> Alarm:
    """Return the alarm used when nothing valid has been stored."""
    return Alarm(
        enabled=False,
        version=SCREEN_ALARM_VERSION,
        alarm_type=AlarmType.ONE_TIME,
        hour=7,
        minute=0,
        melody=0,
    )