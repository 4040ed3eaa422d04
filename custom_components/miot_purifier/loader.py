"""Batched property reads for MIoT devices."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from .const import METHOD_GET_PROPERTIES
from .properties import ServiceMap
from .protocol import item_value

if TYPE_CHECKING:
    from .device_types.base import MiotDevice

_LOGGER = logging.getLogger(__name__)


class PropertyLoader:
    """Resolve property names, read them in one call and decode the results."""

    def __init__(self, device: MiotDevice, service_map: ServiceMap) -> None:
        """Bind the loader to ``device`` and its ``service_map``."""

        self._device = device
        self._service_map = service_map

    def resolve(self, names: Sequence[str]) -> list[str]:
        """Return the internal names in ``names`` the service map can address."""

        resolved: list[str] = []
        for name in names:
            canonical = self._device.canonical_name(name)
            if canonical not in self._service_map:
                _LOGGER.debug("Skipping unsupported property %s", name)
                continue
            resolved.append(canonical)
        return resolved

    async def load(self, names: Sequence[str]) -> dict[str, Any]:
        """Read ``names`` and return decoded values keyed by published name."""

        props = self.resolve(names)
        if not props:
            return {}
        params = [self._service_map.address_of(name).as_params() for name in props]
        response = await self._device.call(METHOD_GET_PROPERTIES, params)
        items = list(response or [])
        if len(items) != len(props):
            _LOGGER.warning(
                "Requested %d properties from %s but received %d",
                len(props),
                self._device.device_id,
                len(items),
            )
        result: dict[str, Any] = {}
        for name, item in zip(props, items):
            self._device.push_property(result, name, item_value(item))
        return result
