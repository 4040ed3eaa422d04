"""Transport contract and response helpers for the MIoT property protocol."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

from .const import DEFAULT_REFRESH_DELAY, RESULT_OK
from .exceptions import MiotProtocolError


@runtime_checkable
class MiotTransport(Protocol):
    """RPC client that performs a single request against the device."""

    async def call(self, method: str, params: Any) -> Any:
        """Send ``method`` with ``params`` and return the decoded result."""


@dataclass(frozen=True, slots=True)
class RefreshSpec:
    """Properties to re-read once a write has had time to settle.

    An empty ``properties`` tuple refreshes every monitored property.
    """

    properties: tuple[str, ...] = ()
    delay: timedelta = field(default=DEFAULT_REFRESH_DELAY)


def check_ok(response: Any) -> Any:
    """Validate that every item of a write response reports success."""

    if isinstance(response, str):
        if response.lower() == "ok":
            return response
        raise MiotProtocolError(None, "Could not perform operation")
    if not response:
        raise MiotProtocolError(None, "Could not perform operation")
    if isinstance(response, Sequence):
        for item in response:
            if not isinstance(item, Mapping):
                continue
            code = item.get("code", RESULT_OK)
            if code != RESULT_OK:
                raise MiotProtocolError(
                    code,
                    f"Could not perform operation on {item.get('siid')}/"
                    f"{item.get('piid')}: code {code}",
                )
    return response


def item_value(item: Any) -> Any:
    """Extract the value from a ``get_properties`` response item."""

    if isinstance(item, Mapping):
        return item.get("value")
    return item
