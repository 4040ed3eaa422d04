"""Device type implementations for the MIoT purifier component."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from ..config import DeviceConfig
from ..const import MODEL_AIRPURIFIER_3C
from ..exceptions import MiotConfigError
from ..protocol import MiotTransport
from .air_purifier import AirPurifier3C
from .base import MiotDevice

_MODEL_FACTORIES: dict[str, type[AirPurifier3C]] = {
    MODEL_AIRPURIFIER_3C: AirPurifier3C,
}


def create_device(
    transport: MiotTransport,
    options: Mapping[str, Any] | DeviceConfig,
    *,
    sleep: Callable[[float], Awaitable[Any]] | None = None,
) -> MiotDevice:
    """Validate ``options`` and build the device class for its model."""

    if isinstance(options, DeviceConfig):
        config = options
    else:
        config = DeviceConfig.from_dict(options)
    factory = _MODEL_FACTORIES.get(config.model)
    if factory is None:
        raise MiotConfigError(f"Unsupported model: {config.model}")
    return factory(transport, config, sleep=sleep)


__all__ = [
    "AirPurifier3C",
    "MiotDevice",
    "create_device",
]
