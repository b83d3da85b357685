"""Rendering of each screen of the clock onto a canvas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .alarm import AlarmField, AlarmType, is_field_visible
from .config import HEADER_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH
from .draw_bell import RINGING_PROMPT
from .icons import Canvas, draw_bell_icon, draw_bell_slash_icon, draw_bt_icon, draw_wifi_icon
from .melodies import MELODIES, MELODY_COUNT
from .state import AppState

VISIBLE_MELODY_COUNT = 4
WEEK_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_TYPE_NAMES = {AlarmType.ONE_TIME: "Once", AlarmType.SPECIFIC_DATE: "Date", AlarmType.REPEATED: "Repeat"}


def format_time(now: Optional[datetime]) -> str:
    """Return HH:MM, or an error marker when the time is unknown."""
    return now.strftime("%H:%M") if now is not None else "Time Err"


def format_date(now: Optional[datetime]) -> str:
    """Return e.g. 'Mon 2024-12-23', or an error marker when the time is unknown."""
    return now.strftime("%a %Y-%m-%d") if now is not None else "Date Err"


def draw_idle_screen(canvas: Canvas, state: AppState, now: Optional[datetime]) -> None:
    """Clock face with sensor line, alarm summary, date and status icons."""
    canvas.clear()
    canvas.text_size = 2
    canvas.set_cursor(0, HEADER_HEIGHT)
    canvas.print(format_time(now))

    canvas.text_size = 1
    canvas.set_cursor(0, HEADER_HEIGHT + 22)
    canvas.print(f"T:{24.0:.1f}C H:{50.0:.1f}%")

    canvas.set_cursor(0, HEADER_HEIGHT + 32)
    canvas.print("Alarm ON" if any(a.enabled for a in state.alarms) else "Alarm OFF")

    canvas.set_cursor(0, SCREEN_HEIGHT - 12)
    canvas.print(format_date(now))

    draw_wifi_icon(canvas, 0, 0)
    draw_bt_icon(canvas, SCREEN_WIDTH - 10, 0)


def draw_alarm_overview(canvas: Canvas, state: AppState) -> None:
    """List of alarm slots with their times and an on/off bell."""
    canvas.clear()
    canvas.set_cursor(0, 0)
    canvas.print("Alarms")
    for i, alarm in enumerate(state.alarms):
        y = 12 + i * 16
        canvas.set_cursor(0, y)
        marker = ">" if i == state.selected_alarm_index else " "
        canvas.print(f"{marker}A{i + 1}: {alarm.hour:02d}:{alarm.minute:02d}")
        icon = draw_bell_icon if alarm.enabled else draw_bell_slash_icon
        icon(canvas, SCREEN_WIDTH - 10, y)


def _bracket(state: AppState, field: AlarmField, text: str) -> str:
    return f"[{text}]" if state.selected_field == field else text


def _marker(state: AppState, field: AlarmField) -> str:
    return ">" if state.selected_field == field else " "


def draw_alarm_config(canvas: Canvas, state: AppState, melody_playing: bool) -> None:
    """Editor for the alarm being configured, highlighting the selected field."""
    alarm = state.temp_alarm
    canvas.clear()
    y = 0

    def line(text: str) -> None:
        nonlocal y
        canvas.set_cursor(0, y)
        y += 10
        canvas.print(text)

    line(f"Config A{state.selected_alarm_index + 1}")

    if is_field_visible(alarm.alarm_type, AlarmField.TYPE):
        line(f"{_marker(state, AlarmField.TYPE)}Type: {_TYPE_NAMES[alarm.alarm_type]}")

    hour = _bracket(state, AlarmField.TIME_HOUR, f"{alarm.hour:02d}")
    minute = _bracket(state, AlarmField.TIME_MIN, f"{alarm.minute:02d}")
    line(f" Time: {hour}:{minute}")

    if is_field_visible(alarm.alarm_type, AlarmField.DATE_YEAR):
        year = _bracket(state, AlarmField.DATE_YEAR, f"{alarm.year:04d}")
        month = _bracket(state, AlarmField.DATE_MONTH, f"{alarm.month:02d}")
        day = _bracket(state, AlarmField.DATE_DAY, f"{alarm.day:02d}")
        line(f" Date: {year}-{month}-{day}")

    if is_field_visible(alarm.alarm_type, AlarmField.REPEAT_DAYS):
        editing_days = state.selected_field == AlarmField.REPEAT_DAYS
        line(">Days:" if editing_days else " Days:")
        cells = []
        for i, (name, active) in enumerate(zip(WEEK_DAYS, alarm.repeat_days)):
            cell = name[0] + ("*" if active else " ")
            if editing_days and i == state.current_repeat_day_index:
                cell = f"[{cell}]"
            cells.append(cell + " ")
        line("".join(cells))

    line(f"{_marker(state, AlarmField.ENABLED)}Enabled: {'Yes' if alarm.enabled else 'No'}")
    line(f"{_marker(state, AlarmField.MELODY)}Melody: {MELODIES[alarm.melody].name}")

    if state.selected_field == AlarmField.MELODY and melody_playing:
        canvas.clear()
        canvas.set_cursor(0, SCREEN_HEIGHT - 20)
        canvas.print("Previewing...")


def draw_melody_preview(canvas: Canvas, state: AppState, selected_index: int) -> None:
    """Scrolling melody list with the selected entry marked."""
    if selected_index < state.scroll_offset:
        state.scroll_offset = selected_index
    if selected_index >= state.scroll_offset + VISIBLE_MELODY_COUNT:
        state.scroll_offset = selected_index - VISIBLE_MELODY_COUNT + 1

    canvas.clear()
    canvas.set_cursor(0, 0)
    canvas.print("Select Melody:")

    last = min(state.scroll_offset + VISIBLE_MELODY_COUNT, MELODY_COUNT)
    for row, index in enumerate(range(state.scroll_offset, last)):
        canvas.set_cursor(0, 12 + row * 10)
        canvas.print("> " if index == selected_index else "  ")
        canvas.print(MELODIES[index].name)

    canvas.set_cursor(0, SCREEN_HEIGHT - 10)
    canvas.print(RINGING_PROMPT)


def draw_snooze_message(canvas: Canvas, was_snoozed: bool) -> None:
    """Message shown after the ringing alarm was snoozed or stopped."""
    canvas.clear()
    canvas.text_size = 1
    canvas.set_cursor((SCREEN_WIDTH - 100) // 2, SCREEN_HEIGHT // 2 - 4)
    canvas.print("Snooze for 10 mins" if was_snoozed else "Alarm STOPPED")


def draw_error_screen(canvas: Canvas, message: str) -> None:
    """Error text, one line per segment; each break consumes two characters."""
    canvas.clear()
    canvas.text_size = 1
    y = 10
    start = 0
    while start < len(message):
        end = message.find("\n", start)
        if end == -1:
            end = len(message)
        canvas.set_cursor(10, y)
        canvas.print(message[start:end])
        y += 8
        start = end + 2