import calendar
from datetime import datetime

import pytest

from xmasalarm.alarm import Alarm
from xmasalarm.utils import current_year, is_time_available, max_day, set_alarm_to_current_time


def test_current_year_from_clock():
    assert current_year(datetime(2031, 5, 6, 7, 8)) == 2031


def test_current_year_fallback():
    assert current_year(None) == 2025


@pytest.mark.parametrize("year", [1999, 2000, 2023, 2024, 2100])
@pytest.mark.parametrize("month", range(1, 13))
def test_max_day_matches_calendar(year, month):
    assert max_day(year, month) == calendar.monthrange(year, month)[1]


def test_max_day_month_zero_is_previous_december():
    assert max_day(2024, 0) == calendar.monthrange(2023, 12)[1]


def test_max_day_month_thirteen_is_next_january():
    assert max_day(2024, 13) == calendar.monthrange(2025, 1)[1]


def test_max_day_february_leap():
    assert max_day(2024, 2) == 29
    assert max_day(2023, 2) == 28


def test_time_available():
    assert is_time_available(datetime(2024, 1, 1)) is True
    assert is_time_available(datetime(2023, 12, 31)) is False
    assert is_time_available(None) is False


def test_set_alarm_with_clock():
    alarm = Alarm()
    set_alarm_to_current_time(alarm, datetime(2026, 3, 14, 22, 5))
    assert (alarm.hour, alarm.minute) == (7, 0)
    assert (alarm.year, alarm.month, alarm.day) == (2026, 3, 14)


def test_set_alarm_without_clock():
    alarm = Alarm(hour=1, minute=2)
    set_alarm_to_current_time(alarm, None)
    assert (alarm.hour, alarm.minute) == (9, 9)
    assert (alarm.year, alarm.month, alarm.day) == (2020, 9, 9)