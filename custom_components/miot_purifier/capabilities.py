"""Capability interfaces implemented by MIoT device types."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PowerControllable(Protocol):
    """Device that can be switched on and off."""

    @property
    def power(self) -> bool | None: ...

    async def set_power(self, power: bool) -> bool | None: ...

    async def change_power(self, power: bool) -> Any: ...


@runtime_checkable
class ModeControllable(Protocol):
    """Device with a selectable operating mode."""

    @property
    def mode(self) -> str | None: ...

    @property
    def modes(self) -> tuple[str, ...]: ...

    async def set_mode(self, mode: str) -> str | None: ...

    async def change_mode(self, mode: str) -> Any: ...


@runtime_checkable
class AQISensor(Protocol):
    """Device reporting an air quality index (PM2.5)."""

    @property
    def aqi(self) -> int | None: ...


@runtime_checkable
class LEDBrightnessControllable(Protocol):
    """Device whose indicator LEDs can be dimmed."""

    @property
    def led_brightness(self) -> str | None: ...

    async def set_led_brightness(self, level: str) -> str | None: ...

    async def change_led_brightness(self, level: str) -> None: ...


@runtime_checkable
class BuzzerControllable(Protocol):
    """Device with a switchable buzzer."""

    @property
    def buzzer(self) -> bool | None: ...

    async def set_buzzer(self, active: bool) -> bool | None: ...

    async def change_buzzer(self, active: bool) -> None: ...
