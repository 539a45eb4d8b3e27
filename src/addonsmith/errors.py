from __future__ import annotations


class AddonsmithError(Exception):
    """Base class for errors raised at the workbench and config seams."""


class UnknownFieldError(AddonsmithError):
    def __init__(self, model: str, field: str) -> None:
        super().__init__(f"{model} has no field named {field!r}")
        self.model = model
        self.field = field


class InvalidFieldValueError(AddonsmithError):
    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value for {field}: {value!r} ({reason})")
        self.field = field
        self.value = value
        self.reason = reason


class ConfigError(AddonsmithError):
    """A state/config file could not be read or did not validate."""
