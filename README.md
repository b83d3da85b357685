# xmasalarm

This package holds the logic of a small bedside alarm clock. The clock has
three alarm slots and a buzzer that plays festive melodies. It also has an
RGB status LED and a 128x64 monochrome screen, and it is driven by three
buttons: mode, adjust and confirm.

Nothing in the package touches hardware. You pass in a millisecond clock, a
tone output and an LED writer. Screens are drawn onto an in-memory `Canvas`,
which you can inspect pixel by pixel and line by line.

## Installation

```
pip install xmasalarm
```

To run the test suite:

```
pip install "xmasalarm[test]"
pytest
```

## Modules

- `xmasalarm.config`: pin numbers, screen size, the UI timeout
  (`UI_TIMEOUT_MS`, 30 seconds) and the alarm record versions.
- `xmasalarm.alarm`: the `Alarm` dataclass, `AlarmType` and `AlarmField`.
  - `AlarmType` has three values: `ONE_TIME`, `SPECIFIC_DATE` and `REPEATED`.
  - `AlarmField` lists the editor fields in the order the editor steps through them.
  - `is_field_visible()` tells whether a field applies to an alarm type.
    Date fields apply only to `SPECIFIC_DATE`, and repeat days only to `REPEATED`.
  - `default_alarm()` returns a disabled one-time alarm set to 07:00.
- `xmasalarm.melodies`: six built-in tunes in `MELODIES`, each a `Melody`
  with a name, a tempo and flat frequency/duration data.
  - `get_melody_data()`, `get_melody_length()` and `get_melody_tempo()` look a
    tune up by id.
  - For an unknown id they return `None`, `0` and `DEFAULT_TEMPO` (120).
- `xmasalarm.melody_engine`: `MelodyPlayer` plays a melody without blocking.
  - Each call to `update()` sounds the next note once its time has come.
  - `stop()` silences the buzzer.
  - `note_duration()` turns a note value into milliseconds. A negative value
    means a dotted note.
- `xmasalarm.led`: `RgbLed` drives three channels through `writer(pin, value)`.
  - `LedMode.WIFI` blinks green every 300 ms.
  - `LedMode.MELODY` blinks orange every 250 ms.
  - `LedMode.OFF` turns the LED off.
  - `LedMode.CUSTOM` leaves control to `set_color()` and `blink()`.
  - `update()` does the toggling.
- `xmasalarm.utils`: date helpers.
  - `max_day(year, month)` returns the last day of a month.
  - `current_year()`, `is_time_available()` and `set_alarm_to_current_time()`
    take a `datetime`, or `None` when the clock is not synchronised.
- `xmasalarm.storage`: `AlarmStore(path)` keeps alarms in a single JSON file,
  keyed by slot index.
  - `save()` writes through a temporary file and then replaces the target.
  - `load()` returns `default_alarm()` when a slot is missing, malformed, or
    carries an unknown version.
- `xmasalarm.state`: `UIState`, the screen being shown, and `AppState`, the
  shared state of the clock.
- `xmasalarm.icons`: `Canvas` and the 8x8 icons.
  - The icons are drawn with `draw_wifi_icon()`, `draw_bt_icon()`,
    `draw_bell_icon()` and `draw_bell_slash_icon()`.
  - `BELL_BITMAP_32X32` holds the large bell.
- `xmasalarm.draw_bell`: the ringing screen.
  - `BellAnimation.draw()` draws the large bell with a damped horizontal
    bounce, using `ui_bounce()`, and a prompt line below it.
- `xmasalarm.ui`: the other screens.
  - `draw_idle_screen()` draws the idle screen.
  - `draw_alarm_overview()` draws the overview of the three slots.
  - `draw_alarm_config()` draws the alarm editor.
  - `draw_melody_preview()` draws the scrolling melody picker.
  - `draw_snooze_message()` draws the message shown after a snooze or stop.
  - `draw_error_screen()` draws the error screen.
  - `format_time()` and `format_date()` format the clock and calendar lines.
- `xmasalarm.controller`: `AlarmClock`, the state machine of the clock.

## Example

```python
from xmasalarm.melody_engine import MelodyPlayer
from xmasalarm.melodies import get_melody_data, get_melody_length, get_melody_tempo


class Buzzer:
    def __init__(self):
        self.played = []

    def tone(self, pin, frequency, duration_ms):
        self.played.append((pin, frequency, duration_ms))

    def no_tone(self, pin):
        pass


buzzer = Buzzer()
player = MelodyPlayer(buzzer, clock=lambda: 0)
player.start(get_melody_data(2), get_melody_length(2), get_melody_tempo(2), 15)
player.update()
print(buzzer.played)  # [(15, 330, 299)]: first note of "Jingle Bell"
```

## The controller

You build an `AlarmClock` from three objects: an `AppState`, a `MelodyPlayer`
and an `AlarmStore`. On each pass of your main loop, call two methods:

- `handle_buttons(mode_pressed, adjust_pressed, confirm_pressed, now_ms, now)`
  with the current button levels, the uptime in milliseconds and the wall-clock
  time.
- `check_and_trigger_alarms(now)`, which starts ringing in two cases: when an
  enabled alarm matches the current minute, or when a snooze has run out.
  - A one-time alarm disables itself when it fires.
  - A date alarm fires only on its date.
  - A repeated alarm fires on its marked weekdays, Monday to Sunday.

The buttons behave as follows:

- **Mode.** The mode button acts when it is released.
  - On the idle and overview screens it toggles between the two.
  - In the editor it moves to the next visible field. A press held longer than
    one second on the repeat-days field clears all the days instead.
  - In the melody picker it returns to the editor.
- **Adjust.** The adjust button is debounced at 200 ms.
  - On the overview it selects the next slot.
  - In the editor it steps the selected field. On the melody field it opens
    the picker and plays a preview.
  - In the picker it plays the next melody.
- **Confirm.** The confirm button is debounced at 200 ms.
  - On the overview it opens the editor on a copy of the selected alarm.
  - In the editor it toggles the highlighted repeat day. On any other field it
    saves the alarm and returns to the idle screen.
  - In the picker it takes the previewed melody.

While an alarm rings, mode or adjust snoozes it for `snooze_duration_sec`
(600 seconds by default), and confirm stops it. After `UI_TIMEOUT_MS` with no
button activity, the clock returns to the idle screen.

## What the package does not do

There is no command and no main loop. Your code has to poll the buttons, call
the controller, and then draw the screen for `state.ui_state`. It must also
pass the canvas on to a real display if there is one.

The idle screen shows fixed placeholder readings, 24.0 °C and 50.0 %, because
no temperature or humidity sensor is read. There is no Wi-Fi, Bluetooth or
time synchronisation: the icons are drawn, but nothing stands behind them.