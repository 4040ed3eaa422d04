"""Base device facade shared by MIoT device types."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from ..config import DeviceConfig
from ..properties import PropertyDefinition
from ..protocol import MiotTransport, RefreshSpec

_LOGGER = logging.getLogger(__name__)

PropertyListener = Callable[[str, Any, Any], None]


class MiotDevice:
    """Property registry, value cache and RPC entry point for one device."""

    device_type = "miio:generic"

    def __init__(
        self,
        transport: MiotTransport,
        config: DeviceConfig,
        *,
        sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        """Bind the transport and validated configuration."""

        self._transport = transport
        self.config = config
        self._sleep = sleep or asyncio.sleep
        self._definitions: dict[str, PropertyDefinition] = {}
        self._reverse_definitions: dict[str, str] = {}
        self._properties: dict[str, Any] = {}
        self._listeners: list[PropertyListener] = []
        self._modes: tuple[str, ...] = ()

    @property
    def device_id(self) -> str:
        """Return the identifier sent as ``did`` on every request item."""

        return self.config.device_id

    def define_property(
        self,
        name: str,
        *,
        alias: str | None = None,
        mapper: Callable[[Any], Any] | None = None,
    ) -> PropertyDefinition:
        """Register ``name`` so loaded values are mapped and published."""

        definition = PropertyDefinition(name=name, alias=alias, mapper=mapper)
        self._definitions[name] = definition
        if alias:
            self._reverse_definitions[alias] = name
        return definition

    @property
    def property_definitions(self) -> Mapping[str, PropertyDefinition]:
        """Return the registered definitions keyed by wire name."""

        return MappingProxyType(self._definitions)

    def canonical_name(self, name: str) -> str:
        """Rewrite a display alias back to the device internal name."""

        return self._reverse_definitions.get(name, name)

    def push_property(self, result: dict[str, Any], name: str, value: Any) -> None:
        """Store ``value`` in ``result`` under the published name."""

        definition = self._definitions.get(name)
        if definition is None:
            result[name] = value
            return
        result[definition.display_name] = definition.map_value(value)

    def get_property(self, name: str) -> Any:
        """Return the cached value by display or internal name."""

        if name in self._properties:
            return self._properties[name]
        definition = self._definitions.get(name)
        if definition is not None:
            return self._properties.get(definition.display_name)
        return None

    @property
    def properties(self) -> dict[str, Any]:
        """Return a snapshot of the cached property values."""

        return dict(self._properties)

    def set_property(self, name: str, value: Any) -> bool:
        """Update the cache and notify listeners when the value changed."""

        old_value = self._properties.get(name)
        if name in self._properties and old_value == value:
            return False
        self._properties[name] = value
        for listener in list(self._listeners):
            try:
                listener(name, value, old_value)
            except Exception:
                _LOGGER.debug(
                    "Property listener failed for %s", name, exc_info=True
                )
        return True

    def add_property_listener(self, listener: PropertyListener) -> Callable[[], None]:
        """Subscribe to property changes; returns an unsubscribe callback."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update_modes(self, modes: Iterable[str]) -> None:
        """Replace the list of modes the device advertises."""

        self._modes = tuple(modes)

    @property
    def modes(self) -> tuple[str, ...]:
        """Return the supported modes."""

        return self._modes

    async def call(
        self,
        method: str,
        params: Any,
        *,
        refresh: RefreshSpec | None = None,
    ) -> Any:
        """Issue ``method`` and optionally re-read properties once settled."""

        response = await self._transport.call(method, params)
        if refresh is not None and self.config.refresh_on_write:
            await self._refresh_after_write(refresh)
        return response

    async def _refresh_after_write(self, refresh: RefreshSpec) -> None:
        names = list(refresh.properties) or list(self._definitions)
        _LOGGER.debug(
            "Refreshing %s on %s in %ss",
            names,
            self.device_id,
            refresh.delay.total_seconds(),
        )
        await self._sleep(refresh.delay.total_seconds())
        try:
            await self.refresh_properties(names)
        except Exception as err:
            # The write already succeeded; the next poll will catch up.
            _LOGGER.warning(
                "Refreshing %s after write failed on %s: %s", names, self.device_id, err
            )

    async def refresh_properties(self, names: Sequence[str]) -> dict[str, Any]:
        """Load ``names`` from the device and update the cache."""

        values = await self.load_properties(names)
        for name, value in values.items():
            self.set_property(name, value)
        return values

    async def poll(self) -> dict[str, Any]:
        """Refresh every registered property once."""

        return await self.refresh_properties(list(self._definitions))

    async def load_properties(self, names: Sequence[str]) -> dict[str, Any]:
        """Read ``names`` from the device, keyed by published name."""

        raise NotImplementedError
