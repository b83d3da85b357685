"""The animated ringing-bell screen."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .icons import BELL_BITMAP_32X32, Canvas

BELL_SIZE = 32
RINGING_PROMPT = "Mod:Abort, Cmf:OK"


def ui_bounce(position: int, target: int, velocity: float, step: float) -> tuple[int, float, bool]:
    """Advance a damped spring one step; return (position, velocity, still_moving)."""
    force = target - position
    velocity = (velocity + force * step) * 0.85
    position += int(velocity)
    if abs(force) < 1 and abs(velocity) < 0.5:
        return target, 0.0, False
    return position, velocity, True


@dataclass
class BellAnimation:
    """Horizontal bounce state of the ringing bell."""

    offset_x: int = 0
    target_x: int = 0
    velocity_x: float = 0.0

    def draw(self, canvas: Canvas) -> None:
        """Draw one frame: the bell, bounced toward its target, and the prompt."""
        canvas.clear()
        self.offset_x, self.velocity_x, _ = ui_bounce(self.offset_x, self.target_x, self.velocity_x, 0.3)
        bell_x = (SCREEN_WIDTH - BELL_SIZE) // 2 + self.offset_x
        bell_y = (SCREEN_HEIGHT - BELL_SIZE) // 2 - 8
        canvas.draw_bitmap(bell_x, bell_y, BELL_BITMAP_32X32, BELL_SIZE, BELL_SIZE)
        canvas.set_cursor((SCREEN_WIDTH - 90) // 2, SCREEN_HEIGHT - 10)
        canvas.print(RINGING_PROMPT)