"""Device configuration schema for the MIoT purifier component."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import voluptuous as vol

from .const import DEFAULT_REFRESH_DELAY, MODEL_AIRPURIFIER_3C
from .exceptions import MiotConfigError

CONF_DEVICE_ID = "device_id"
CONF_MODEL = "model"
CONF_NAME = "name"
CONF_REFRESH_DELAY = "refresh_delay"
CONF_REFRESH_ON_WRITE = "refresh_on_write"

_DEFAULT_REFRESH_DELAY_MS = int(DEFAULT_REFRESH_DELAY.total_seconds() * 1000)

DEVICE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_DEVICE_ID): vol.All(
            vol.Any(str, int), vol.Coerce(str), vol.Length(min=1)
        ),
        vol.Optional(CONF_MODEL, default=MODEL_AIRPURIFIER_3C): vol.All(
            str, vol.Length(min=1)
        ),
        vol.Optional(CONF_NAME): str,
        vol.Optional(CONF_REFRESH_DELAY, default=_DEFAULT_REFRESH_DELAY_MS): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(CONF_REFRESH_ON_WRITE, default=True): bool,
    }
)


@dataclass(frozen=True, slots=True)
class DeviceConfig:
    """Validated options a device instance is constructed with."""

    device_id: str
    model: str = MODEL_AIRPURIFIER_3C
    name: str | None = None
    refresh_delay: timedelta = DEFAULT_REFRESH_DELAY
    refresh_on_write: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeviceConfig:
        """Validate raw options and build a configuration."""

        try:
            validated = DEVICE_SCHEMA(dict(data))
        except vol.Invalid as exc:
            raise MiotConfigError(f"Invalid device configuration: {exc}") from exc
        return cls(
            device_id=validated[CONF_DEVICE_ID],
            model=validated[CONF_MODEL],
            name=validated.get(CONF_NAME),
            refresh_delay=timedelta(milliseconds=validated[CONF_REFRESH_DELAY]),
            refresh_on_write=validated[CONF_REFRESH_ON_WRITE],
        )

    def as_dict(self) -> dict[str, Any]:
        """Serialise back into schema-compatible options."""

        data: dict[str, Any] = {
            CONF_DEVICE_ID: self.device_id,
            CONF_MODEL: self.model,
            CONF_REFRESH_DELAY: int(self.refresh_delay.total_seconds() * 1000),
            CONF_REFRESH_ON_WRITE: self.refresh_on_write,
        }
        if self.name is not None:
            data[CONF_NAME] = self.name
        return data
