"""Config errors – raised while loading settings or switching environments.

Each error names the offending setting in ``detail`` so that callers can
log ``exc.to_dict()`` the same way they log flag errors.
"""
from __future__ import annotations

from typing import Any

from mp_flags.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration is invalid or could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no ``<PREFIX>_<FIELD>`` key."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class UnparseableSettingError(ConfigError):
    """A raw setting value cannot be coerced to its field's type."""

    default_code = "unparseable_setting"

    def __init__(self, setting_name: str, raw: str, expected: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot parse {setting_name}={raw!r} as {expected}",
            detail={"setting": setting_name, "raw": raw, "expected": expected},
            **kwargs,
        )
        self.setting_name = setting_name
        self.raw = raw
        self.expected = expected


class InvalidSettingValueError(ConfigError):
    """A parsed setting is outside the values the engine accepts."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class InvalidEnvironmentError(InvalidSettingValueError):
    """An engine was given an empty or non-string environment label."""

    default_code = "invalid_environment"

    def __init__(self, environment: object, **kwargs: Any) -> None:
        super().__init__("environment", environment, "must be a non-empty string", **kwargs)


__all__ = [
    "ConfigError",
    "InvalidEnvironmentError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnparseableSettingError",
]
