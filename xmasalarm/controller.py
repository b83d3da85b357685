"""Button handling and alarm triggering: the clock's state machine."""

from __future__ import annotations

import copy
import logging
from datetime import datetime
from typing import Optional

from .alarm import Alarm, AlarmField, AlarmType, is_field_visible
from .config import BUZZER_PIN, SCREEN_ALARM_VERSION, UI_TIMEOUT_MS
from .melodies import MELODY_COUNT, get_melody_data, get_melody_length, get_melody_tempo
from .melody_engine import MelodyPlayer
from .state import AppState, UIState
from .storage import AlarmStore
from .utils import current_year, is_time_available, max_day, set_alarm_to_current_time

log = logging.getLogger(__name__)

DEBOUNCE_MS = 200
LONG_PRESS_MS = 1000


def _epoch(now: Optional[datetime]) -> int:
    return int(now.timestamp()) if now is not None else 0


class AlarmClock:
    """Reacts to button polls and the wall clock, updating the shared state."""

    def __init__(self, state: AppState, player: MelodyPlayer, store: AlarmStore) -> None:
        self.state = state
        self.player = player
        self.store = store
        self._mode_press_time: Optional[int] = None
        self._last_adjust_press = 0
        self._last_confirm_press = 0

    def _play(self, melody_id: int) -> None:
        self.player.start(
            get_melody_data(melody_id),
            get_melody_length(melody_id),
            get_melody_tempo(melody_id),
            BUZZER_PIN,
        )

    def _silence(self, snoozed: bool, now_ms: int, now: Optional[datetime]) -> None:
        s = self.state
        s.alarm_active = False
        self.player.stop()
        s.last_snoozed = snoozed
        if snoozed:
            s.snooze_until = _epoch(now) + s.snooze_duration_sec
        s.ui_state = UIState.ALARM_SNOOZE_MESSAGE
        s.message_display_start = now_ms

    def handle_buttons(
        self,
        mode_pressed: bool,
        adjust_pressed: bool,
        confirm_pressed: bool,
        now_ms: int,
        now: Optional[datetime] = None,
    ) -> None:
        """Process one poll of the three buttons at ``now_ms`` milliseconds of uptime."""
        s = self.state

        if mode_pressed and self._mode_press_time is None:
            self._mode_press_time = now_ms
        if not mode_pressed and self._mode_press_time is not None:
            held = now_ms - self._mode_press_time
            self.player.stop()
            self._on_mode(held, now_ms, now)
            s.last_interaction_time = now_ms
            self._mode_press_time = None

        if adjust_pressed and now_ms - self._last_adjust_press > DEBOUNCE_MS:
            self._last_adjust_press = now_ms
            self._on_adjust(now_ms, now)
            s.last_interaction_time = now_ms

        if confirm_pressed and now_ms - self._last_confirm_press > DEBOUNCE_MS:
            self.player.stop()
            self._last_confirm_press = now_ms
            self._on_confirm(now_ms, now)
            s.last_interaction_time = now_ms

        if now_ms - s.last_interaction_time > UI_TIMEOUT_MS and s.ui_state != UIState.IDLE_SCREEN:
            s.ui_state = UIState.IDLE_SCREEN

    def _on_mode(self, held: int, now_ms: int, now: Optional[datetime]) -> None:
        s = self.state
        if s.ui_state == UIState.ALARM_CONFIG:
            if s.selected_field == AlarmField.REPEAT_DAYS and held > LONG_PRESS_MS:
                s.temp_alarm.repeat_days = [False] * 7
            else:
                field = s.selected_field
                while True:
                    field = AlarmField((field + 1) % len(AlarmField))
                    if is_field_visible(s.temp_alarm.alarm_type, field):
                        break
                s.selected_field = field
        elif s.ui_state == UIState.MELODY_PREVIEW:
            s.ui_state = UIState.ALARM_CONFIG
            s.selected_field = AlarmField.MELODY
        elif s.ui_state == UIState.ALARM_RINGING:
            self._silence(True, now_ms, now)
        else:
            s.ui_state = UIState.ALARM_OVERVIEW if s.ui_state == UIState.IDLE_SCREEN else UIState.IDLE_SCREEN

    def _on_adjust(self, now_ms: int, now: Optional[datetime]) -> None:
        s = self.state
        if s.ui_state == UIState.ALARM_OVERVIEW:
            s.selected_alarm_index = (s.selected_alarm_index + 1) % len(s.alarms)
        elif s.ui_state == UIState.ALARM_CONFIG:
            log.debug("Adjusting field: %s", s.selected_field.name)
            self._adjust_field(s.temp_alarm, now)
        elif s.ui_state == UIState.MELODY_PREVIEW:
            s.preview_melody_index = (s.preview_melody_index + 1) % MELODY_COUNT
            self._play(s.preview_melody_index)
        elif s.ui_state == UIState.ALARM_RINGING:
            self._silence(True, now_ms, now)

    def _adjust_field(self, a: Alarm, now: Optional[datetime]) -> None:
        s = self.state
        field = s.selected_field
        if field == AlarmField.TYPE:
            a.alarm_type = AlarmType((a.alarm_type + 1) % len(AlarmType))
        elif field == AlarmField.TIME_HOUR:
            a.hour = (a.hour + 1) % 24
        elif field == AlarmField.TIME_MIN:
            a.minute = (a.minute + 1) % 60
        elif field == AlarmField.DATE_YEAR:
            year = current_year(now)
            a.year = year if a.year >= year + 10 else a.year + 1
        elif field == AlarmField.DATE_MONTH:
            a.month = a.month % 12 + 1
        elif field == AlarmField.DATE_DAY:
            a.day = a.day % max_day(a.year, a.month) + 1
        elif field == AlarmField.REPEAT_DAYS:
            s.current_repeat_day_index = (s.current_repeat_day_index + 1) % 7
        elif field == AlarmField.ENABLED:
            a.enabled = not a.enabled
        elif field == AlarmField.MELODY:
            s.ui_state = UIState.MELODY_PREVIEW
            s.preview_melody_index = s.alarms[s.selected_alarm_index].melody
            self._play(s.preview_melody_index)

    def _on_confirm(self, now_ms: int, now: Optional[datetime]) -> None:
        s = self.state
        if s.ui_state == UIState.ALARM_OVERVIEW:
            s.temp_alarm = copy.deepcopy(s.alarms[s.selected_alarm_index])
            t = s.temp_alarm
            if (t.year == 0 or t.month == 0 or t.day == 0) and is_time_available(now):
                set_alarm_to_current_time(t, now)
            s.ui_state = UIState.ALARM_CONFIG
            s.selected_field = AlarmField.TYPE
        elif s.ui_state == UIState.ALARM_CONFIG:
            if s.selected_field == AlarmField.REPEAT_DAYS:
                i = s.current_repeat_day_index
                s.temp_alarm.repeat_days[i] = not s.temp_alarm.repeat_days[i]
            else:
                saved = copy.deepcopy(s.temp_alarm)
                saved.version = SCREEN_ALARM_VERSION
                s.alarms[s.selected_alarm_index] = saved
                self.store.save(saved, s.selected_alarm_index)
                s.ui_state = UIState.IDLE_SCREEN
        elif s.ui_state == UIState.MELODY_PREVIEW:
            s.temp_alarm.melody = s.preview_melody_index
            s.ui_state = UIState.ALARM_CONFIG
            s.selected_field = AlarmField.MELODY
        elif s.ui_state == UIState.ALARM_RINGING:
            self._silence(False, now_ms, now)

    def check_and_trigger_alarms(self, now: Optional[datetime]) -> None:
        """Start ringing if an alarm is due at ``now`` or a snooze has run out."""
        if now is None:
            return
        s = self.state
        for alarm in s.alarms:
            if not alarm.enabled:
                continue
            if alarm.hour != now.hour or alarm.minute != now.minute:
                continue
            if now.minute == s.last_trigger_minute:
                continue

            if alarm.alarm_type == AlarmType.ONE_TIME:
                due = True
                alarm.enabled = False
            elif alarm.alarm_type == AlarmType.SPECIFIC_DATE:
                due = (alarm.year, alarm.month, alarm.day) == (now.year, now.month, now.day)
            else:
                due = alarm.repeat_days[now.weekday()]

            if due:
                s.alarm_active = True
                s.last_trigger_minute = now.minute
                self._play(alarm.melody)
                s.ui_state = UIState.ALARM_RINGING
                break

        if s.snooze_until > 0 and _epoch(now) >= s.snooze_until:
            s.snooze_until = 0
            s.alarm_active = True
            s.ui_state = UIState.ALARM_RINGING
            self._play(s.alarms[s.selected_alarm_index].melody)