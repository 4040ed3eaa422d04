"""Error types raised by the MIoT purifier component."""

from __future__ import annotations

from .const import UNSUPPORTED_VALUE_CODE


class MiotError(Exception):
    """Base exception for all MIoT device errors."""


class MiotProtocolError(MiotError):
    """Error reported by the device or transport with a numeric result code."""

    def __init__(self, code: int | None, message: str | None = None) -> None:
        """Store the protocol ``code`` alongside a readable message."""

        self.code = code
        super().__init__(message or f"Device returned error code {code}")


class UnknownPropertyError(MiotError, KeyError):
    """Raised when a property name is missing from the service map."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown property: {self.name}"


class UnsupportedModeError(MiotError):
    """The device rejected a mode change as unsupported."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"Mode `{mode}` not supported")


class InvalidLEDBrightnessError(MiotError, ValueError):
    """Raised locally for LED brightness levels outside bright/dim/off."""

    def __init__(self, level: object) -> None:
        self.level = level
        super().__init__(f"Invalid LED brightness: {level}")


class MiotConfigError(MiotError, ValueError):
    """Device configuration failed validation."""


def translate_mode_error(err: BaseException, mode: str) -> BaseException:
    """Return the error ``change_mode`` should raise for ``err``.

    Only an error carrying the unsupported-value code is recast; anything else
    is returned as the identical object so callers can re-raise it untouched.
    """

    if getattr(err, "code", None) == UNSUPPORTED_VALUE_CODE:
        return UnsupportedModeError(mode)
    return err
