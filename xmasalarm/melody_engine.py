"""Non-blocking playback of a melody on a buzzer."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, Sequence

from .melodies import DEFAULT_TEMPO

log = logging.getLogger(__name__)


class ToneOutput(Protocol):
    """Something that can sound a tone on a pin and silence it."""

    def tone(self, pin: int, frequency: int, duration_ms: int) -> None: ...

    def no_tone(self, pin: int) -> None: ...


def note_duration(duration: int, tempo: int) -> int:
    """Length in milliseconds of a 1/duration note; negative durations are dotted."""
    whole_note = (60_000 * 4) // tempo
    if duration > 0:
        return whole_note // duration
    return int((whole_note // abs(duration)) * 1.5)


class MelodyPlayer:
    """Plays one note at a time; call update() regularly to advance."""

    def __init__(self, output: ToneOutput, clock: Callable[[], int]) -> None:
        self._output = output
        self._clock = clock
        self._melody: Optional[Sequence[int]] = None
        self._length = 0
        self._tempo = DEFAULT_TEMPO
        self._index = 0
        self._next_note_time = 0
        self._pin = 0
        self._playing = False

    def start(self, melody: Optional[Sequence[int]], length: int, tempo: int, pin: int) -> None:
        """Begin playing ``melody`` from its first note."""
        self._melody = melody
        self._length = length
        self._tempo = tempo
        self._index = 0
        self._next_note_time = 0
        self._pin = pin
        self._playing = True

    def update(self) -> None:
        """Sound the next note if its time has come."""
        if not self._playing or not self._melody:
            return
        now = self._clock()
        if now < self._next_note_time:
            return
        note = self._melody[self._index * 2]
        duration = note_duration(self._melody[self._index * 2 + 1], self._tempo)
        if note > 0:
            self._output.tone(self._pin, note, int(duration * 0.9))
        else:
            self._output.no_tone(self._pin)
        self._next_note_time = now + duration
        self._index += 1
        if self._index >= self._length:
            self._playing = False
            self._output.no_tone(self._pin)

    def is_playing(self) -> bool:
        """Return whether a melody is still in progress."""
        return self._playing

    def stop(self) -> None:
        """Stop playback and silence the buzzer."""
        self._playing = False
        self._output.no_tone(self._pin)
        log.debug("Stop melody")