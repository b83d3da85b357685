"""Hardware layout, display geometry and alarm limits of the clock."""

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

OLED_RESET = -1
SDA_PIN = 16
SCL_PIN = 17
RESET_BUTTON_PIN = 32

DHT_PIN = 14
DHT_TYPE = "DHT22"

MODE_BUTTON_PIN = 33
ADJUST_BUTTON_PIN = 5
CONFIRM_BUTTON_PIN = 4
BUZZER_PIN = 15

UI_TIMEOUT_MS = 30_000  # half a minute
HEADER_HEIGHT = 10  # vertical space reserved for top icons
TEXT_COLOR = 1

MAX_SCREEN_ALARMS = 3
MAX_TOTAL_ALARMS = 10
SCREEN_ALARM_VERSION = 0xA1A1
WEB_ALARM_VERSION = 0xB2B2

RED_PIN = 18
GREEN_PIN = 19
BLUE_PIN = 23