"""Persistent storage of alarms in a JSON file, one entry per slot."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from .alarm import Alarm, AlarmType, default_alarm
from .config import SCREEN_ALARM_VERSION, WEB_ALARM_VERSION

_VALID_VERSIONS = frozenset({SCREEN_ALARM_VERSION, WEB_ALARM_VERSION})


def _to_record(alarm: Alarm) -> dict[str, Any]:
    return {
        "enabled": alarm.enabled,
        "version": alarm.version,
        "type": int(alarm.alarm_type),
        "hour": alarm.hour,
        "minute": alarm.minute,
        "year": alarm.year,
        "month": alarm.month,
        "day": alarm.day,
        "repeat_days": list(alarm.repeat_days),
        "melody": alarm.melody,
        "name": alarm.name,
    }


def _from_record(record: Any) -> Alarm:
    if not isinstance(record, dict) or record.get("version") not in _VALID_VERSIONS:
        return default_alarm()
    try:
        repeat_days = [bool(day) for day in record["repeat_days"]]
        if len(repeat_days) != 7:
            return default_alarm()
        return Alarm(
            enabled=bool(record["enabled"]),
            version=int(record["version"]),
            alarm_type=AlarmType(record["type"]),
            hour=int(record["hour"]),
            minute=int(record["minute"]),
            year=int(record["year"]),
            month=int(record["month"]),
            day=int(record["day"]),
            repeat_days=repeat_days,
            melody=int(record["melody"]),
            name=str(record.get("name", "")),
        )
    except (KeyError, TypeError, ValueError):
        return default_alarm()


class AlarmStore:
    """Saves and loads alarms by slot index in a single JSON file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    @staticmethod
    def _key(index: int) -> str:
        return f"alarm{index}"

    def _read(self) -> dict[str, Any]:
        try:
            with self.path.open(encoding="utf-8") as handle:
                content = json.load(handle)
        except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return content if isinstance(content, dict) else {}

    def save(self, alarm: Alarm, index: int = 0) -> None:
        """Store ``alarm`` in slot ``index``, replacing what was there."""
        content = self._read()
        content[self._key(index)] = _to_record(alarm)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".alarms-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(content, handle, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def load(self, index: int = 0) -> Alarm:
        """Return the alarm in slot ``index``, or the default if none valid is stored."""
        return _from_record(self._read().get(self._key(index)))