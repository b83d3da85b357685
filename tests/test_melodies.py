import pytest

from xmasalarm.melodies import (
    D4,
    DEFAULT_TEMPO,
    MELODIES,
    MELODY_COUNT,
    Melody,
    get_melody_data,
    get_melody_length,
    get_melody_tempo,
)


def test_six_melodies():
    assert MELODY_COUNT == 6
    assert len(MELODIES) == MELODY_COUNT
    assert all(get_melody_data(i) is not None for i in range(MELODY_COUNT))
    assert get_melody_data(MELODY_COUNT) is None


def test_tempos_match_table():
    assert [get_melody_tempo(i) for i in range(MELODY_COUNT)] == [160, 155, 180, 150, 137, 130]


@pytest.mark.parametrize("melody_id", range(6))
def test_length_is_half_the_data(melody_id):
    data = get_melody_data(melody_id)
    assert len(data) % 2 == 0
    assert get_melody_length(melody_id) == len(data) // 2


@pytest.mark.parametrize("melody_id", range(6))
def test_no_zero_durations(melody_id):
    data = list(get_melody_data(melody_id))
    frequencies = data[0::2]
    durations = data[1::2]
    assert len(frequencies) == len(durations) == get_melody_length(melody_id)
    assert all(duration != 0 for duration in durations)
    assert all(freq >= 0 for freq in frequencies)


def test_we_wish_you_starts_on_d4():
    data = get_melody_data(0)
    assert data[0] == D4 == 294
    assert data[1] == 4


@pytest.mark.parametrize("melody_id", [-1, 6, 100])
def test_unknown_ids(melody_id):
    assert get_melody_data(melody_id) is None
    assert get_melody_length(melody_id) == 0
    assert get_melody_tempo(melody_id) == DEFAULT_TEMPO == 120


def test_melody_notes_pairs():
    melody = Melody("tune", 100, (440, 4, 0, 2))
    assert melody.notes == [(440, 4), (0, 2)]
    assert melody.length == 2


def test_names_are_distinct():
    names = [m.name for m in MELODIES]
    assert len(set(names)) == len(names)
    assert names[-1] == "Silent Night"
    assert [m.length for m in MELODIES] == [
        get_melody_length(i) for i in range(MELODY_COUNT)
    ]