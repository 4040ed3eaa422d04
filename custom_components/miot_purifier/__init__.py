"""MIoT air purifier property adapter."""

from __future__ import annotations

from .capabilities import (
    AQISensor,
    BuzzerControllable,
    LEDBrightnessControllable,
    ModeControllable,
    PowerControllable,
)
from .const import DOMAIN, PropertyName
from .device_types import AirPurifier3C, MiotDevice, create_device
from .exceptions import (
    InvalidLEDBrightnessError,
    MiotConfigError,
    MiotError,
    MiotProtocolError,
    UnknownPropertyError,
    UnsupportedModeError,
)
from .protocol import MiotTransport, RefreshSpec

__all__ = [
    "DOMAIN",
    "AQISensor",
    "AirPurifier3C",
    "BuzzerControllable",
    "InvalidLEDBrightnessError",
    "LEDBrightnessControllable",
    "MiotConfigError",
    "MiotDevice",
    "MiotError",
    "MiotProtocolError",
    "MiotTransport",
    "ModeControllable",
    "PowerControllable",
    "PropertyName",
    "RefreshSpec",
    "UnknownPropertyError",
    "UnsupportedModeError",
    "create_device",
]
