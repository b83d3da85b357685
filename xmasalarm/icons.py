"""A monochrome drawing surface and the small status icons drawn on it."""

from __future__ import annotations

from typing import Sequence

from .config import SCREEN_HEIGHT, SCREEN_WIDTH

WIFI_ICON = bytes([
    0b00011000,
    0b00111100,
    0b01111110,
    0b11011011,
    0b00011000,
    0b00011000,
    0b00000000,
    0b00011000,
])

BT_ICON = bytes([
    0b10000001,
    0b01000010,
    0b00100100,
    0b00011000,
    0b00011000,
    0b00100100,
    0b01000010,
    0b10000001,
])

BELL_ICON = bytes([
    0b00111000,
    0b01000100,
    0b10000010,
    0b10000010,
    0b10000010,
    0b01000100,
    0b00111000,
    0b00010000,
])

BELL_SLASH_ICON = bytes([
    0b00111000,
    0b01000100,
    0b10100010,
    0b10010010,
    0b10001010,
    0b01010100,
    0b00111000,
    0b00010000,
])

BELL_BITMAP_32X32 = bytes([
    0x00, 0x00, 0x00, 0x00, 0x00, 0x80, 0xC0, 0xE0,
    0xF0, 0x70, 0x00, 0x80, 0x80, 0x80, 0x80, 0xC0,
    0xC0, 0x80, 0x80, 0x80, 0x00, 0x30, 0x70, 0xF0,
    0xE0, 0xC0, 0x80, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x03, 0x03, 0x83, 0xF9,
    0xFC, 0xFE, 0xFF, 0xFF, 0xFF, 0xFF, 0x1F, 0x0F,
    0x0F, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFE, 0xF8,
    0xE1, 0x03, 0x03, 0x03, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x0F,
    0xBF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFE,
    0xFC, 0xF8, 0xF1, 0xFB, 0xFF, 0xFF, 0xFF, 0x1F,
    0x07, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x04, 0x0F, 0x07,
    0x03, 0x01, 0x00, 0x00, 0x01, 0x01, 0x01, 0x01,
    0x01, 0x01, 0x00, 0x00, 0x01, 0x07, 0x0F, 0x06,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
])


class Canvas:
    """Pixel surface that also records the text printed at each cursor position."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.text_size = 1
        self.cursor = (0, 0)
        self._pixels: set[tuple[int, int]] = set()
        self._lines: list[str] = []
        self._line_open = False

    def clear(self) -> None:
        """Blank all pixels and forget printed text."""
        self._pixels.clear()
        self._lines.clear()
        self._line_open = False

    def draw_bitmap(self, x: int, y: int, bitmap: Sequence[int], width: int, height: int) -> None:
        """Light the set bits of a row-major, MSB-first bitmap; off-screen pixels are dropped."""
        byte_width = (width + 7) // 8
        for row in range(height):
            for col in range(width):
                index = row * byte_width + col // 8
                byte = bitmap[index] if index < len(bitmap) else 0
                if byte & (0x80 >> (col & 7)):
                    px, py = x + col, y + row
                    if 0 <= px < self.width and 0 <= py < self.height:
                        self._pixels.add((px, py))

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor; the next print starts a new line of text."""
        self.cursor = (x, y)
        self._line_open = False

    def print(self, text: str) -> None:
        """Print text at the cursor, continuing the current line if one is open."""
        if self._line_open:
            self._lines[-1] += text
        else:
            self._lines.append(text)
            self._line_open = True

    def pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel at (x, y) is lit."""
        return (x, y) in self._pixels

    def text_lines(self) -> list[str]:
        """Return printed text, one entry per cursor placement, in drawing order."""
        return list(self._lines)


def draw_wifi_icon(canvas: Canvas, x: int, y: int) -> None:
    """Draw the 8x8 Wi-Fi icon."""
    canvas.draw_bitmap(x, y, WIFI_ICON, 8, 8)


def draw_bt_icon(canvas: Canvas, x: int, y: int) -> None:
    """Draw the 8x8 Bluetooth icon."""
    canvas.draw_bitmap(x, y, BT_ICON, 8, 8)


def draw_bell_icon(canvas: Canvas, x: int, y: int) -> None:
    """Draw the 8x8 bell icon."""
    canvas.draw_bitmap(x, y, BELL_ICON, 8, 8)


def draw_bell_slash_icon(canvas: Canvas, x: int, y: int) -> None:
    """Draw the 8x8 crossed-out bell icon."""
    canvas.draw_bitmap(x, y, BELL_SLASH_ICON, 8, 8)