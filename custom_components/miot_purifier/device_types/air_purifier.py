"""Mi Air Purifier 3C support.

The purifier reports a mode that also tells whether it is running: switching
power off forces the ``idle`` mode, every other mode implies the device is on.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from ..capabilities import (
    AQISensor,
    BuzzerControllable,
    LEDBrightnessControllable,
    ModeControllable,
    PowerControllable,
)
from ..commands import CommandDispatcher
from ..config import DeviceConfig
from ..const import DEVICE_TYPE_AIR_PURIFIER, PropertyName
from ..exceptions import translate_mode_error
from ..loader import PropertyLoader
from ..properties import ServiceMap
from ..protocol import MiotTransport, check_ok
from ..service_catalog import DeviceCatalog, catalog_for_model
from .base import MiotDevice


class AirPurifier3C(
    MiotDevice,
    PowerControllable,
    ModeControllable,
    AQISensor,
    LEDBrightnessControllable,
    BuzzerControllable,
):
    """Air purifier exposing power, mode, AQI, LED brightness and buzzer."""

    device_type = DEVICE_TYPE_AIR_PURIFIER

    def __init__(
        self,
        transport: MiotTransport,
        config: DeviceConfig,
        *,
        catalog: DeviceCatalog | None = None,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        """Register the catalog properties and wire up loader and dispatcher."""

        super().__init__(transport, config, sleep=sleep)
        self.catalog = catalog or catalog_for_model(config.model)
        self.service_map = ServiceMap(self.catalog, config.device_id)
        self._loader = PropertyLoader(self, self.service_map)
        self._dispatcher = CommandDispatcher(self, self.service_map)

        for spec in self.catalog.properties:
            name = spec.name.value
            self.define_property(
                name, alias=spec.alias, mapper=self.service_map.mapper_for(name)
            )
        self.update_modes(self.catalog.modes)

    @property
    def dispatcher(self) -> CommandDispatcher:
        """Return the command builder used for writes."""

        return self._dispatcher

    async def load_properties(self, names: Sequence[str]) -> dict[str, Any]:
        """Read ``names`` in a single batched request."""

        return await self._loader.load(names)

    @property
    def power(self) -> bool | None:
        """Return the cached power flag."""

        return self.get_property(PropertyName.POWER.value)

    async def set_power(self, power: bool) -> bool | None:
        """Switch power and return the refreshed flag."""

        await self.change_power(power)
        return self.power

    async def change_power(self, power: bool) -> Any:
        """Turn the purifier on or off; off also forces the idle mode."""

        return await self._dispatcher.dispatch(self._dispatcher.power_command(power))

    @property
    def mode(self) -> str | None:
        """Return the cached mode."""

        return self.get_property(PropertyName.MODE.value)

    async def set_mode(self, mode: str) -> str | None:
        """Change mode and return the refreshed mode."""

        await self.change_mode(mode)
        return self.mode

    async def change_mode(self, mode: str) -> Any:
        """Perform a mode change requested by ``set_mode``."""

        command = self._dispatcher.mode_command(mode)
        try:
            response = await self._dispatcher.dispatch(command)
            return check_ok(response)
        except Exception as err:
            translated = translate_mode_error(err, mode)
            if translated is err:
                raise
            raise translated from err

    async def favorite_rpm(self, level: int | None = None) -> int | None:
        """Get the favorite fan speed, or set it when ``level`` is given."""

        if level is None:
            return self.get_property("favoriteRPM")
        return await self.set_favorite_rpm(level)

    async def set_favorite_rpm(self, value: int) -> None:
        """Set the fan speed used by the favorite mode (300 to 2200 RPM)."""

        await self._dispatcher.dispatch(self._dispatcher.favorite_rpm_command(value))

    @property
    def aqi(self) -> int | None:
        """Return the cached PM2.5 reading."""

        return self.get_property(PropertyName.AQI.value)

    @property
    def filter_life_remaining(self) -> int | None:
        """Return the remaining filter life in percent."""

        return self.get_property("filterLifeRemaining")

    @property
    def filter_hours_used(self) -> int | None:
        """Return the hours the current filter has been used."""

        return self.get_property("filterHoursUsed")

    @property
    def led_brightness(self) -> str | None:
        """Return the cached LED brightness."""

        return self.get_property("ledBrightness")

    async def set_led_brightness(self, level: str) -> str | None:
        """Change the LED brightness and return the refreshed level."""

        await self.change_led_brightness(level)
        return self.led_brightness

    async def change_led_brightness(self, level: str) -> None:
        """Set the LED brightness to ``bright``, ``dim`` or ``off``."""

        await self._dispatcher.dispatch(self._dispatcher.led_brightness_command(level))

    @property
    def buzzer(self) -> bool | None:
        """Return whether the buzzer is enabled."""

        return self.get_property(PropertyName.BUZZER.value)

    async def set_buzzer(self, active: bool) -> bool | None:
        """Toggle the buzzer and return the refreshed flag."""

        await self.change_buzzer(active)
        return self.buzzer

    async def change_buzzer(self, active: bool) -> None:
        """Enable or disable beeping on button presses."""

        await self._dispatcher.dispatch(self._dispatcher.buzzer_command(active))
