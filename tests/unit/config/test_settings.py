"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from mp_flags.config import (
    ConfigError,
    EnvSettingsLoader,
    FlagSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    UnparseableSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_typed_values(self) -> None:
        environ = {
            "APP_HOST": "example.com",
            "APP_PORT": "9000",
            "APP_RATIO": "0.25",
            "APP_DEBUG": "yes",
            "APP_ALLOWED_ORIGINS": "http://a.com, http://b.com,",
        }
        settings = EnvSettingsLoader(environ).load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.ratio == 0.25
        assert settings.debug is True
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    @pytest.mark.parametrize("falsy", ["false", "0", "no", "off", "whatever"])
    def test_bool_false(self, falsy: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": falsy}).load(AppSettings).debug is False

    def test_defaults_preserved_when_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "from-env")
        assert EnvSettingsLoader().load(AppSettings).host == "from-env"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_unparseable_value(self) -> None:
        with pytest.raises(UnparseableSettingError) as exc_info:
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)
        assert isinstance(exc_info.value, ConfigError)
        assert exc_info.value.detail == {"setting": "APP_PORT", "raw": "eighty", "expected": "int"}


# ---------------------------------------------------------------------------
# FlagSettings
# ---------------------------------------------------------------------------


class TestFlagSettings:
    def test_defaults(self) -> None:
        settings = FlagSettings()
        assert settings.environment == "development"
        assert settings.external_prefix == "FLAG_"
        assert settings.external_overrides is True
        assert settings.log_level == "INFO"
        assert settings.log_level_number == 20

    def test_loaded_from_flags_prefix(self) -> None:
        environ = {
            "FLAGS_ENVIRONMENT": "production",
            "FLAGS_EXTERNAL_PREFIX": "FF_",
            "FLAGS_EXTERNAL_OVERRIDES": "0",
            "FLAGS_LOG_LEVEL": "debug",
        }
        settings = EnvSettingsLoader(environ).load(FlagSettings)
        assert settings.environment == "production"
        assert settings.external_prefix == "FF_"
        assert settings.external_overrides is False
        assert settings.log_level_number == 10

    def test_empty_environment_invalid(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            FlagSettings(environment=" ")
        assert exc_info.value.setting_name == "environment"

    def test_unknown_log_level_invalid_through_loader(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"FLAGS_LOG_LEVEL": "loud"}).load(FlagSettings)
