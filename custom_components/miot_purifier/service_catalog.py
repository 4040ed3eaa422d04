"""Data models for the MIoT device service catalog."""

from __future__ import annotations

import json
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .const import PropertyName
from .exceptions import MiotConfigError, UnknownPropertyError

_DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class ValueMap(BaseModel):
    """Bidirectional table between logical labels and wire codes."""

    values: dict[str, int]
    aliases: dict[str, str] = Field(
        default_factory=dict, description="Extra input labels for a canonical label"
    )
    default: str | None = Field(
        default=None, description="Label encoded when the input is not recognised"
    )
    unknown: str | None = Field(
        default=None, description="Label decoded when the code is not recognised"
    )
    strict: bool = Field(
        default=False, description="Reject unrecognised input instead of falling back"
    )

    @model_validator(mode="after")
    def check_consistency(self) -> ValueMap:
        codes = list(self.values.values())
        if len(set(codes)) != len(codes):
            raise ValueError(f"Duplicate wire codes in value map: {codes}")
        for alias, target in self.aliases.items():
            if target not in self.values:
                raise ValueError(f"Alias {alias!r} targets unknown label {target!r}")
        if self.default is not None and self.default not in self.values:
            raise ValueError(f"Default label {self.default!r} is not in the value map")
        if self.strict and self.default is not None:
            raise ValueError("A strict value map cannot declare a default label")
        return self

    def resolve(self, label: Any) -> str | None:
        """Return the canonical label for ``label`` or None when unmapped."""

        if not isinstance(label, str):
            return None
        if label in self.values:
            return label
        return self.aliases.get(label)

    def encode(self, label: Any) -> int | None:
        """Translate ``label`` into its wire code, falling back to ``default``.

        A strict map raises ``ValueError`` for unrecognised input.
        """

        resolved = self.resolve(label)
        if resolved is None and self.strict:
            raise ValueError(f"No wire code for {label!r}")
        if resolved is None:
            resolved = self.default
        if resolved is None:
            return None
        return self.values[resolved]

    def decode(self, code: Any) -> str | None:
        """Translate a wire code back into its canonical label."""

        for label, value in self.values.items():
            if value == code and not isinstance(code, bool):
                return label
        return self.unknown


class PropertySpec(BaseModel):
    """Describe one addressable property of the device."""

    name: PropertyName
    siid: int = Field(ge=0)
    piid: int = Field(ge=0)
    alias: str | None = None
    value_map: ValueMap | None = None


class DeviceCatalog(BaseModel):
    """Static service table for a single device model."""

    model: str
    device_type: str
    modes: list[str] = Field(default_factory=list)
    properties: list[PropertySpec]

    @model_validator(mode="after")
    def check_unique_names(self) -> DeviceCatalog:
        names = [spec.name for spec in self.properties]
        if len(set(names)) != len(names):
            raise ValueError("Property names must be unique")
        aliases = [spec.alias for spec in self.properties if spec.alias]
        if len(set(aliases)) != len(aliases):
            raise ValueError("Property aliases must be unique")
        return self

    def get_property(self, name: str) -> PropertySpec:
        """Retrieve a property spec by logical name."""

        for spec in self.properties:
            if spec.name == name:
                return spec
        raise UnknownPropertyError(str(name))


def load_device_catalog(path: Path) -> DeviceCatalog:
    """Load and validate a device catalog from JSON."""

    with path.open("r", encoding="utf-8") as fp:
        payload = json.load(fp)
    return DeviceCatalog.model_validate(payload)


@cache
def catalog_for_model(model: str) -> DeviceCatalog:
    """Load and cache the packaged catalog for ``model``."""

    path = _DEFAULT_DATA_DIR / f"{model}.json"
    if not path.is_file():
        raise MiotConfigError(f"Unsupported model: {model}")
    return load_device_catalog(path)
