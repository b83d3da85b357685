"""RGB status LED with a blinking pattern driven by a millisecond clock."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .config import BLUE_PIN, GREEN_PIN, RED_PIN


class LedMode(Enum):
    """What the LED is signalling."""

    OFF = "off"
    WIFI = "wifi"
    MELODY = "melody"
    CUSTOM = "custom"


class RgbLed:
    """Drives three PWM channels through ``writer(pin, value)``."""

    def __init__(self, writer: Callable[[int, int], None], clock: Callable[[], int]) -> None:
        self._writer = writer
        self._clock = clock
        self._last_toggle = 0
        self._lit = False
        self._interval = 500
        self._blink_color = (0, 0, 0)
        self._mode = LedMode.OFF
        for pin in (RED_PIN, GREEN_PIN, BLUE_PIN):
            writer(pin, 0)

    @property
    def mode(self) -> LedMode:
        return self._mode

    @property
    def lit(self) -> bool:
        """Whether the blink pattern is currently in its on phase."""
        return self._lit

    def set_mode(self, mode: LedMode) -> None:
        """Switch to ``mode``; setting the current mode again does nothing."""
        if mode == self._mode:
            return
        self._mode = mode
        if mode is LedMode.OFF:
            self.set_color(0, 0, 0)
        elif mode is LedMode.WIFI:
            self.blink(0, 255, 0, 300)
        elif mode is LedMode.MELODY:
            self.blink(220, 100, 3, 250)

    def set_color(self, r: int, g: int, b: int) -> None:
        """Show a colour at once."""
        self._writer(RED_PIN, r)
        self._writer(GREEN_PIN, g)
        self._writer(BLUE_PIN, b)

    def blink(self, r: int, g: int, b: int, interval_ms: int) -> None:
        """Configure a blink colour and period; update() does the toggling."""
        self._blink_color = (r, g, b)
        self._interval = interval_ms
        self._last_toggle = self._clock()
        self._lit = False

    def update(self) -> None:
        """Toggle the LED if the blink interval has passed."""
        now = self._clock()
        if now - self._last_toggle < self._interval:
            return
        self._last_toggle = now
        self._lit = not self._lit
        if self._lit:
            self.set_color(*self._blink_color)
        else:
            self.set_color(0, 0, 0)