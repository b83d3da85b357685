"""Screen states and the shared state of the running clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .alarm import Alarm, AlarmField
from .config import MAX_SCREEN_ALARMS


class UIState(Enum):
    """Which screen the clock is showing."""

    IDLE_SCREEN = "idle"
    ALARM_OVERVIEW = "overview"
    ALARM_CONFIG = "config"
    MELODY_PREVIEW = "melody_preview"
    ALARM_RINGING = "ringing"
    ALARM_SNOOZE_MESSAGE = "snooze_message"
    ERROR_SCREEN = "error"


@dataclass
class AppState:
    """Everything the screens and the button handler share."""

    alarms: list[Alarm] = field(default_factory=lambda: [Alarm() for _ in range(MAX_SCREEN_ALARMS)])
    temp_alarm: Alarm = field(default_factory=Alarm)
    ui_state: UIState = UIState.IDLE_SCREEN
    selected_alarm_index: int = 0
    selected_field: AlarmField = AlarmField.TYPE
    current_repeat_day_index: int = 0
    preview_melody_index: int = 0
    scroll_offset: int = 0
    last_snoozed: bool = False
    message_display_start: int = 0
    snooze_until: int = 0
    last_interaction_time: int = 0
    snooze_duration_sec: int = 600
    last_trigger_minute: int = -1
    alarm_active: bool = False
    error_message: str = ""