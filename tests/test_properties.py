"""Service map addressing and value translation tests."""

from __future__ import annotations

import pytest

from custom_components.miot_purifier.const import MODEL_AIRPURIFIER_3C, PropertyName
from custom_components.miot_purifier.exceptions import UnknownPropertyError
from custom_components.miot_purifier.properties import (
    PropertyAddress,
    PropertyDefinition,
    ServiceMap,
)
from custom_components.miot_purifier.service_catalog import catalog_for_model


@pytest.fixture
def service_map() -> ServiceMap:
    """Return the 3C service map for a numeric device id."""

    return ServiceMap(catalog_for_model(MODEL_AIRPURIFIER_3C), 123456789)


@pytest.mark.parametrize(
    ("name", "siid", "piid"),
    [
        ("power", 2, 1),
        ("mode", 2, 4),
        ("aqi", 3, 4),
        ("favorite_rpm", 9, 3),
        ("filter_life_remaining", 4, 1),
        ("filter_hours_used", 4, 3),
        ("led_brightness_level", 7, 2),
        ("buzzer", 6, 1),
    ],
)
def test_address_of_matches_protocol_schema(
    service_map: ServiceMap, name: str, siid: int, piid: int
) -> None:
    """Each logical name resolves to its fixed service/property pair."""

    assert service_map.address_of(name) == PropertyAddress(
        siid=siid, piid=piid, did="123456789"
    )


def test_address_items_stringify_device_id(service_map: ServiceMap) -> None:
    """Request items scope every property to the device id as a string."""

    address = service_map.address_of(PropertyName.FAVORITE_RPM)

    assert address.as_params() == {"did": "123456789", "siid": 9, "piid": 3}
    assert address.with_value(500) == {
        "did": "123456789",
        "siid": 9,
        "piid": 3,
        "value": 500,
    }


def test_unknown_names_are_not_addressable(service_map: ServiceMap) -> None:
    """Names outside the service map fail lookups and membership checks."""

    assert "bogus" not in service_map
    assert "power" in service_map
    assert PropertyName.BUZZER in service_map
    with pytest.raises(UnknownPropertyError):
        service_map.address_of("bogus")


@pytest.mark.parametrize("mode", ["auto", "silent", "favorite", "idle"])
def test_mode_round_trips_through_the_table(service_map: ServiceMap, mode: str) -> None:
    """Decoding an encoded mode yields the original label."""

    assert service_map.decode("mode", service_map.encode("mode", mode)) == mode


def test_idle_mode_encodes_to_wire_three(service_map: ServiceMap) -> None:
    """A direct ``idle`` request writes the same code power-off forces."""

    assert service_map.encode("mode", "idle") == 3
    assert service_map.encode("mode", "idle:") == 0


def test_sleep_is_accepted_as_silent(service_map: ServiceMap) -> None:
    """``sleep`` encodes to the silent code but reads back as ``silent``."""

    assert service_map.encode("mode", "sleep") == 1
    assert service_map.decode("mode", 1) == "silent"


def test_unknown_mode_falls_back_to_auto(service_map: ServiceMap) -> None:
    """Unrecognised modes encode to the auto code instead of failing."""

    assert service_map.encode("mode", "unknown-mode") == 0
    assert service_map.encode("mode", None) == 0
    assert service_map.decode("mode", 9) is None


@pytest.mark.parametrize(("level", "code"), [("bright", 0), ("dim", 1), ("off", 2)])
def test_led_brightness_round_trips(
    service_map: ServiceMap, level: str, code: int
) -> None:
    """LED brightness labels map to codes 0-2 and back."""

    assert service_map.encode("led_brightness_level", level) == code
    assert service_map.decode("led_brightness_level", code) == level


def test_led_brightness_unknown_code_reads_as_unknown(service_map: ServiceMap) -> None:
    """Codes outside the table decode to ``unknown``."""

    assert service_map.decode("led_brightness_level", 7) == "unknown"


def test_led_brightness_rejects_unknown_levels(service_map: ServiceMap) -> None:
    """The LED table is strict on input and has no fallback label."""

    with pytest.raises(ValueError):
        service_map.encode("led_brightness_level", "ultra")


def test_unmapped_properties_pass_values_through(service_map: ServiceMap) -> None:
    """Properties without a value table keep their wire values."""

    assert service_map.encode("favorite_rpm", 1200) == 1200
    assert service_map.decode("aqi", 14) == 14
    assert service_map.mapper_for("aqi") is None
    assert service_map.mapper_for("mode") is not None


def test_property_definition_publishes_under_alias() -> None:
    """Definitions map values and expose their display name."""

    definition = PropertyDefinition(name="favorite_rpm", alias="favoriteRPM")
    mapped = PropertyDefinition(name="mode", mapper=lambda value: f"m{value}")

    assert definition.display_name == "favoriteRPM"
    assert definition.map_value(800) == 800
    assert mapped.display_name == "mode"
    assert mapped.map_value(2) == "m2"
