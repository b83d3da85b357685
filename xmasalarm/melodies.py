"""The built-in alarm melodies as (frequency, duration) pairs.

A duration of n means a 1/n note; a negative value marks a dotted note.
A frequency of 0 is a rest.
"""

from __future__ import annotations

from dataclasses import dataclass

B3 = 247
C4 = 262
D4 = 294
E4 = 330
F4 = 349
FS4 = 370
G4 = 392
A4 = 440
B4 = 494
C5 = 523
D5 = 587
E5 = 659
F5 = 698
REST = 0

DEFAULT_TEMPO = 120


@dataclass(frozen=True)
class Melody:
    """A named tune: a flat sequence of frequency/duration values and a tempo."""

    name: str
    tempo: int
    data: tuple[int, ...]

    @property
    def notes(self) -> list[tuple[int, int]]:
        """The melody as a list of (frequency, duration) pairs."""
        return list(zip(self.data[::2], self.data[1::2]))

    @property
    def length(self) -> int:
        """Number of notes, rests included."""
        return len(self.data) // 2


_WE_WISH_YOU = (
    D4, 4, G4, 4, G4, 4, A4, 4,
    G4, 4, FS4, 4, E4, 2,
    E4, 4, A4, 4, A4, 4, B4, 4,
    A4, 4, G4, 4, FS4, 2,
    D4, 4, B4, 4, B4, 4, C5, 4,
    B4, 4, A4, 4, G4, 2,
    E4, 4, E4, 4, A4, 4, FS4, 4,
    G4, 2, D4, 2,
)

_WHITE_CHRISTMAS = _WE_WISH_YOU

_JINGLE_BELLS = (
    E4, 4, E4, 4, E4, 2,
    E4, 4, E4, 4, E4, 2,
    E4, 4, G4, 4, C4, 4, D4, 4,
    E4, 1,
    F4, 4, F4, 4, F4, 4,
    F4, 4, F4, 4, E4, 4, E4, 4,
    E4, 4, E4, 4, D4, 4, D4, 4,
    E4, 4, D4, 2, G4, 2,
)

_RUDOLF = (
    G4, 4, E4, 4, F4, 4, G4, 4,
    E4, 2, G4, 4, E4, 4, F4, 4,
    G4, 4, E4, 2, G4, 4, E4, 4,
    F4, 4, E4, 4, D4, 2, C4, 2,
    C4, 4, D4, 4, E4, 4, F4, 4,
    G4, 2, A4, 4, B4, 4, C5, 4,
    D5, 4, E5, 2, F5, 4, E5, 4,
    D5, 4, C5, 4, B4, 2, A4, 2,
)

_SANTA_VERSE = (
    G4, 8,
    E4, 8, F4, 8, G4, 4, G4, 4, G4, 4,
    A4, 8, B4, 8, C5, 4, C5, 4, C5, 4,
    E4, 8, F4, 8, G4, 4, G4, 4, G4, 4,
    A4, 8, G4, 8, F4, 4, F4, 2,
    E4, 4, G4, 4, C4, 4, E4, 4,
)

_SANTA_CLAUS = (
    _SANTA_VERSE
    + (D4, 4, F4, 2, B3, 4, C4, -2, REST, 4)
    + _SANTA_VERSE
    + (D4, 4, F4, 2, D5, 4, C5, 1)
)

_SILENT_NIGHT_OPEN = (G4, -4, A4, 8, G4, 4, E4, -2)
_SILENT_NIGHT_MIDDLE = (A4, 2, A4, 4, C5, -4, B4, 8, A4, 4) + _SILENT_NIGHT_OPEN

_SILENT_NIGHT = (
    _SILENT_NIGHT_OPEN
    + _SILENT_NIGHT_OPEN
    + (D5, 2, D5, 4, B4, -2, C5, 2, C5, 4, G4, -2)
    + _SILENT_NIGHT_MIDDLE
    + _SILENT_NIGHT_MIDDLE
    + (
        D5, 2, D5, 4,
        F5, -4, D5, 8, B4, 4,
        C5, -2,
        E5, -2,
        C5, 4, G4, 4, E4, 4,
        G4, -4, F4, 8, D4, 4,
        C4, -2,
    )
)

MELODIES: tuple[Melody, ...] = (
    Melody("We Wish You", 160, _WE_WISH_YOU),
    Melody("White Xmas", 155, _WHITE_CHRISTMAS),
    Melody("Jingle Bell", 180, _JINGLE_BELLS),
    Melody("Rudolf Red Nosed", 150, _RUDOLF),
    Melody("Santa Coming", 137, _SANTA_CLAUS),
    Melody("Silent Night", 130, _SILENT_NIGHT),
)

MELODY_COUNT = len(MELODIES)


def _lookup(melody_id: int) -> Melody | None:
    if 0 <= melody_id < MELODY_COUNT:
        return MELODIES[melody_id]
    return None


def get_melody_data(melody_id: int) -> tuple[int, ...] | None:
    """Return the flat note data of a melody, or None for an unknown id."""
    melody = _lookup(melody_id)
    return melody.data if melody else None


def get_melody_length(melody_id: int) -> int:
    """Return the number of notes in a melody, or 0 for an unknown id."""
    melody = _lookup(melody_id)
    return melody.length if melody else 0


def get_melody_tempo(melody_id: int) -> int:
    """Return a melody's tempo in beats per minute, or the default for an unknown id."""
    melody = _lookup(melody_id)
    return melody.tempo if melody else DEFAULT_TEMPO