"""Property addressing and value translation for MIoT devices."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .const import PropertyName
from .exceptions import UnknownPropertyError
from .service_catalog import DeviceCatalog, PropertySpec

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PropertyAddress:
    """Location of a single property on the remote device."""

    siid: int
    piid: int
    did: str

    def as_params(self) -> dict[str, Any]:
        """Return the item used in a ``get_properties`` request."""

        return {"did": self.did, "siid": self.siid, "piid": self.piid}

    def with_value(self, value: Any) -> dict[str, Any]:
        """Return the item used in a ``set_properties`` request."""

        return {**self.as_params(), "value": value}


@dataclass(frozen=True, slots=True)
class PropertyDefinition:
    """Registration of a device property and its read-side mapper."""

    name: str
    alias: str | None = None
    mapper: Callable[[Any], Any] | None = None

    @property
    def display_name(self) -> str:
        """Return the name the value is published under."""

        return self.alias or self.name

    def map_value(self, value: Any) -> Any:
        """Apply the mapper when one is registered."""

        if self.mapper is None:
            return value
        return self.mapper(value)


class ServiceMap:
    """Translate logical property names into protocol addresses and values."""

    def __init__(self, catalog: DeviceCatalog, device_id: str) -> None:
        """Bind the static ``catalog`` to the device identified by ``device_id``."""

        self._device_id = str(device_id)
        self._specs: dict[str, PropertySpec] = {
            spec.name.value: spec for spec in catalog.properties
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._specs

    @staticmethod
    def _key(name: str) -> str:
        return name.value if isinstance(name, PropertyName) else name

    @property
    def names(self) -> tuple[str, ...]:
        """Return the logical names in catalog order."""

        return tuple(self._specs)

    def spec_for(self, name: str) -> PropertySpec:
        """Return the catalog entry for ``name``."""

        try:
            return self._specs[self._key(name)]
        except KeyError as exc:
            raise UnknownPropertyError(self._key(name)) from exc

    def address_of(self, name: str) -> PropertyAddress:
        """Resolve ``name`` to its service/property index pair."""

        spec = self.spec_for(name)
        return PropertyAddress(siid=spec.siid, piid=spec.piid, did=self._device_id)

    def encode(self, name: str, value: Any) -> Any:
        """Translate a logical value into the wire value for ``name``."""

        spec = self.spec_for(name)
        if spec.value_map is None:
            return value
        encoded = spec.value_map.encode(value)
        if spec.value_map.resolve(value) is None:
            _LOGGER.debug(
                "No %s code for %r, encoding as %r", spec.name.value, value, encoded
            )
        return encoded

    def decode(self, name: str, value: Any) -> Any:
        """Translate a wire value for ``name`` back into its logical value."""

        spec = self.spec_for(name)
        if spec.value_map is None:
            return value
        return spec.value_map.decode(value)

    def mapper_for(self, name: str) -> Callable[[Any], Any] | None:
        """Return the decode function for ``name`` when it needs one."""

        spec = self.spec_for(name)
        if spec.value_map is None:
            return None
        return spec.value_map.decode
