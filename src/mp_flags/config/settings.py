"""Config settings – Settings base class and FlagSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_flags.config.validation import InvalidEnvironmentError, InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FlagSettings(Settings):
    """Process-level settings for a :class:`~mp_flags.feature_flags.FlagEngine`.

    Loaded from ``FLAGS_*`` environment variables by
    :class:`~mp_flags.config.loaders.EnvSettingsLoader`:

    * ``FLAGS_ENVIRONMENT`` – initial environment label.
    * ``FLAGS_EXTERNAL_PREFIX`` – prefix of per-flag override keys.
    * ``FLAGS_EXTERNAL_OVERRIDES`` – whether per-flag override keys are read.
    * ``FLAGS_LOG_LEVEL`` – level passed to ``configure_logging``.
    """

    _prefix: dataclasses.ClassVar[str] = "FLAGS"

    environment: str = "development"
    external_prefix: str = "FLAG_"
    external_overrides: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.environment.strip():
            raise InvalidEnvironmentError(self.environment)
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["FlagSettings", "Settings"]
