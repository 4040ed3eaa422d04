"""Pytest configuration for the MIoT purifier tests."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

import pytest

from custom_components.miot_purifier.config import DeviceConfig
from custom_components.miot_purifier.device_types.air_purifier import AirPurifier3C

DEVICE_ID = 123456789


class FakeTransport:
    """In-memory MIoT device answering batched property requests."""

    def __init__(self) -> None:
        """Start with an empty property store and no scripted replies."""

        self.values: dict[tuple[int, int], Any] = {}
        self.calls: list[tuple[str, list[dict[str, Any]]]] = []
        self._scripted: list[Any] = []

    def script(self, *replies: Any) -> None:
        """Queue replies (or exceptions to raise) for the next calls."""

        self._scripted.extend(replies)

    @property
    def methods(self) -> list[str]:
        """Return the called RPC methods in order."""

        return [method for method, _ in self.calls]

    async def call(self, method: str, params: Any) -> Any:
        """Record the request and answer it like the device would."""

        self.calls.append((method, [dict(item) for item in params]))
        if self._scripted:
            reply = self._scripted.pop(0)
            if isinstance(reply, BaseException):
                raise reply
            return reply
        if method == "get_properties":
            return [
                {**item, "code": 0, "value": self.values.get((item["siid"], item["piid"]))}
                for item in params
            ]
        if method == "set_properties":
            results = []
            for item in params:
                self.values[(item["siid"], item["piid"])] = item["value"]
                results.append(
                    {"did": item["did"], "siid": item["siid"], "piid": item["piid"], "code": 0}
                )
            return results
        raise AssertionError(f"Unexpected method {method}")


class RecordingSleep:
    """Capture requested delays without waiting."""

    def __init__(self) -> None:
        """Initialise the delay log."""

        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        """Record ``seconds`` and yield to the loop once."""

        self.delays.append(seconds)
        await asyncio.sleep(0)


@pytest.fixture
def transport() -> FakeTransport:
    """Return a fake device transport."""

    return FakeTransport()


@pytest.fixture
def sleep() -> RecordingSleep:
    """Return a sleep replacement that records delays."""

    return RecordingSleep()


@pytest.fixture
def purifier(transport: FakeTransport, sleep: RecordingSleep) -> AirPurifier3C:
    """Return an Air Purifier 3C bound to the fake transport."""

    config = DeviceConfig.from_dict({"device_id": DEVICE_ID})
    return AirPurifier3C(transport, config, sleep=sleep)


def pytest_configure(config: pytest.Config) -> None:
    """Register markers used throughout the test suite."""

    config.addinivalue_line(
        "markers", "asyncio: mark coroutine tests to execute via asyncio loop"
    )


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute coroutine tests within a dedicated event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    funcargs = pyfuncitem.funcargs
    kwargs = {name: funcargs[name] for name in pyfuncitem._fixtureinfo.argnames}
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_function(**kwargs))
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True
