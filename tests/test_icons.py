import pytest

from xmasalarm.icons import (
    BT_ICON,
    WIFI_ICON,
    Canvas,
    draw_bell_icon,
    draw_bell_slash_icon,
    draw_bt_icon,
    draw_wifi_icon,
)


def lit(canvas):
    return {(x, y) for x in range(canvas.width) for y in range(canvas.height) if canvas.pixel(x, y)}


def test_wifi_icon_top_row_matches_bitmap():
    canvas = Canvas()
    draw_wifi_icon(canvas, 0, 0)
    assert canvas.pixel(3, 0)
    assert canvas.pixel(4, 0)
    assert not canvas.pixel(0, 0)


def test_lit_pixel_count_equals_set_bits():
    canvas = Canvas()
    draw_wifi_icon(canvas, 0, 0)
    assert len(lit(canvas)) == sum(bin(b).count("1") for b in WIFI_ICON)


def test_bt_icon_is_mirror_symmetric():
    canvas = Canvas()
    draw_bt_icon(canvas, 0, 0)
    pixels = lit(canvas)
    assert pixels
    assert all((7 - x, y) in pixels for x, y in pixels)
    assert len(pixels) == sum(bin(b).count("1") for b in BT_ICON)


def test_drawing_offset_shifts_pixels():
    base = Canvas()
    draw_bell_icon(base, 0, 0)
    moved = Canvas()
    draw_bell_icon(moved, 10, 20)
    assert lit(moved) == {(x + 10, y + 20) for x, y in lit(base)}


def test_bell_and_slash_differ():
    plain = Canvas()
    draw_bell_icon(plain, 0, 0)
    slash = Canvas()
    draw_bell_slash_icon(slash, 0, 0)
    assert lit(plain) != lit(slash)


def test_bitmap_clipped_at_edges():
    canvas = Canvas(8, 8)
    draw_bt_icon(canvas, 4, 4)
    pixels = lit(canvas)
    assert all(0 <= x < 8 and 0 <= y < 8 for x, y in pixels)
    assert canvas.pixel(4, 4)


def test_out_of_range_pixel_is_dark():
    canvas = Canvas()
    assert canvas.pixel(-1, -1) is False


def test_clear_removes_pixels_and_text():
    canvas = Canvas()
    draw_wifi_icon(canvas, 0, 0)
    canvas.print("hello")
    canvas.clear()
    assert lit(canvas) == set()
    assert canvas.text_lines() == []


@pytest.mark.parametrize("parts", [["ab"], ["ab", "cd", "ef"]])
def test_print_concatenates_until_cursor_moves(parts):
    canvas = Canvas()
    canvas.set_cursor(0, 0)
    for part in parts:
        canvas.print(part)
    canvas.set_cursor(0, 10)
    canvas.print("next")
    assert canvas.text_lines() == ["".join(parts), "next"]
    assert canvas.cursor == (0, 10)