import json

import pytest

from xmasalarm.alarm import Alarm, AlarmType, default_alarm
from xmasalarm.config import WEB_ALARM_VERSION
from xmasalarm.storage import AlarmStore


@pytest.fixture
def store(tmp_path):
    return AlarmStore(tmp_path / "alarms.json")


def sample_alarm():
    return Alarm(
        enabled=True,
        alarm_type=AlarmType.REPEATED,
        hour=6,
        minute=45,
        year=2026,
        month=12,
        day=24,
        repeat_days=[True, False, True, False, True, False, False],
        melody=3,
        name="work",
    )


def test_round_trip(store):
    alarm = sample_alarm()
    store.save(alarm, 1)
    assert store.load(1) == alarm


def test_missing_file_gives_default(store):
    assert store.load(0) == default_alarm()


def test_slots_are_independent(store):
    first = sample_alarm()
    second = Alarm(enabled=True, hour=22, minute=30)
    store.save(first, 0)
    store.save(second, 2)
    assert store.load(0) == first
    assert store.load(2) == second
    assert store.load(1) == default_alarm()


def test_overwrite(store):
    store.save(sample_alarm(), 0)
    replacement = Alarm(hour=11, minute=11)
    store.save(replacement, 0)
    assert store.load(0) == replacement


def test_unknown_version_gives_default(store):
    store.save(Alarm(enabled=True, version=0x1234, hour=5), 0)
    assert store.load(0) == default_alarm()


def test_web_version_accepted(store):
    alarm = Alarm(enabled=True, version=WEB_ALARM_VERSION, hour=5, minute=15)
    store.save(alarm, 0)
    loaded = store.load(0)
    assert loaded == alarm
    assert loaded.version == 0xB2B2


def test_corrupt_file_gives_default(store):
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load(0) == default_alarm()


def test_corrupt_file_recovered_by_save(store):
    store.path.write_text("[]", encoding="utf-8")
    alarm = sample_alarm()
    store.save(alarm, 0)
    assert store.load(0) == alarm


def test_malformed_record_gives_default(store):
    record = {"version": WEB_ALARM_VERSION, "enabled": True, "type": 7}
    store.path.write_text(json.dumps({"alarm0": record}), encoding="utf-8")
    assert store.load(0) == default_alarm()


def test_default_index_is_zero(store):
    alarm = sample_alarm()
    store.save(alarm)
    assert store.load(0) == alarm
    assert store.load() == alarm