"""Alarm clock logic: alarms, buzzer melodies, an RGB LED, screens drawn on a canvas and button handling."""

__version__ = "0.1.0"
__all__ = [
    "alarm",
    "config",
    "controller",
    "draw_bell",
    "icons",
    "led",
    "melodies",
    "melody_engine",
    "state",
    "storage",
    "ui",
    "utils",
]