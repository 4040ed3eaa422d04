"""Constants shared across the MIoT purifier component."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Final

DOMAIN: Final = "miot_purifier"

MODEL_AIRPURIFIER_3C: Final = "zhimi.airpurifier.mb4"
DEVICE_TYPE_AIR_PURIFIER: Final = "miio:air-purifier"

METHOD_GET_PROPERTIES: Final = "get_properties"
METHOD_SET_PROPERTIES: Final = "set_properties"

# Protocol result code for a value the device refuses to accept.
UNSUPPORTED_VALUE_CODE: Final = -5001
RESULT_OK: Final = 0

DEFAULT_REFRESH_DELAY: Final = timedelta(milliseconds=200)

FAVORITE_RPM_MIN: Final = 300
FAVORITE_RPM_MAX: Final = 2200


class PropertyName(str, Enum):
    """Logical property names understood by the purifier service map."""

    POWER = "power"
    MODE = "mode"
    AQI = "aqi"
    FAVORITE_RPM = "favorite_rpm"
    FILTER_LIFE_REMAINING = "filter_life_remaining"
    FILTER_HOURS_USED = "filter_hours_used"
    LED_BRIGHTNESS_LEVEL = "led_brightness_level"
    BUZZER = "buzzer"
