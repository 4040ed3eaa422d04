"""Compose batched property writes for MIoT devices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .const import (
    FAVORITE_RPM_MAX,
    FAVORITE_RPM_MIN,
    METHOD_SET_PROPERTIES,
    PropertyName,
)
from .exceptions import InvalidLEDBrightnessError
from .properties import ServiceMap
from .protocol import RefreshSpec

if TYPE_CHECKING:
    from .device_types.base import MiotDevice

_LOGGER = logging.getLogger(__name__)

_POWER_REFRESH = (PropertyName.POWER.value, PropertyName.MODE.value)
_IDLE_MODE_CODE = 3


@dataclass(frozen=True, slots=True)
class SetCommand:
    """Ordered ``set_properties`` items plus an optional follow-up refresh."""

    items: tuple[dict[str, Any], ...]
    refresh: RefreshSpec | None = None


class CommandDispatcher:
    """Build and send the writes behind each high-level device operation."""

    def __init__(self, device: MiotDevice, service_map: ServiceMap) -> None:
        """Bind the dispatcher to ``device`` and its ``service_map``."""

        self._device = device
        self._service_map = service_map

    def _item(self, name: PropertyName, value: Any) -> dict[str, Any]:
        return self._service_map.address_of(name).with_value(value)

    def _refresh(self, *names: str) -> RefreshSpec:
        return RefreshSpec(properties=names, delay=self._device.config.refresh_delay)

    def power_command(self, power: bool) -> SetCommand:
        """Switch power, forcing the idle mode first when turning off."""

        items: list[dict[str, Any]] = []
        if not power:
            items.append(self._item(PropertyName.MODE, _IDLE_MODE_CODE))
        items.append(self._item(PropertyName.POWER, power))
        return SetCommand(tuple(items), self._refresh(*_POWER_REFRESH))

    def mode_command(self, mode: str) -> SetCommand:
        """Write ``mode`` through the mode value table."""

        wire_mode = self._service_map.encode(PropertyName.MODE, mode)
        return SetCommand(
            (self._item(PropertyName.MODE, wire_mode),),
            self._refresh(*_POWER_REFRESH),
        )

    def favorite_rpm_command(self, value: int) -> SetCommand:
        """Write the raw favorite fan speed."""

        if isinstance(value, int) and not (
            FAVORITE_RPM_MIN <= value <= FAVORITE_RPM_MAX
        ):
            _LOGGER.debug(
                "Favorite RPM %s outside %s-%s",
                value,
                FAVORITE_RPM_MIN,
                FAVORITE_RPM_MAX,
            )
        return SetCommand((self._item(PropertyName.FAVORITE_RPM, value),))

    def led_brightness_command(self, level: str) -> SetCommand:
        """Write the LED brightness; rejects unknown levels before any I/O."""

        try:
            code = self._service_map.encode(PropertyName.LED_BRIGHTNESS_LEVEL, level)
        except ValueError as err:
            raise InvalidLEDBrightnessError(level) from err
        return SetCommand((self._item(PropertyName.LED_BRIGHTNESS_LEVEL, code),))

    def buzzer_command(self, active: bool) -> SetCommand:
        """Enable or disable the buzzer."""

        return SetCommand(
            (self._item(PropertyName.BUZZER, bool(active)),),
            self._refresh(PropertyName.BUZZER.value),
        )

    async def dispatch(self, command: SetCommand) -> Any:
        """Send all items of ``command`` in a single ``set_properties`` call."""

        return await self._device.call(
            METHOD_SET_PROPERTIES, list(command.items), refresh=command.refresh
        )
