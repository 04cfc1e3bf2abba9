"""Unit tests for the testing helpers."""

from __future__ import annotations

import asyncio

import pytest

from mp_flags.errors import TypeMismatchError, UnknownFlagError
from mp_flags.feature_flags import EvaluationReason, FlagEngine
from mp_flags.testing import FakeFlagProvider, override_flags


class TestOverrideFlags:
    def test_applies_and_clears(self, flag_engine: FlagEngine) -> None:
        with override_flags(flag_engine, maintenanceMode=True, debugMode=True) as engine:
            assert engine is flag_engine
            assert flag_engine.is_enabled("maintenanceMode")
            assert flag_engine.is_enabled("debugMode")
        assert flag_engine.get_overrides() == {}
        assert flag_engine.get_flag("maintenanceMode").reason is EvaluationReason.DEFAULT

    def test_restores_previous_override(self, flag_engine: FlagEngine) -> None:
        flag_engine.set_override("maintenanceMode", True)
        with override_flags(flag_engine, maintenanceMode=False):
            assert flag_engine.is_enabled("maintenanceMode") is False
        assert flag_engine.get_overrides() == {"maintenanceMode": True}

    def test_restores_on_error(self, flag_engine: FlagEngine) -> None:
        with pytest.raises(RuntimeError):
            with override_flags(flag_engine, debugMode=True):
                raise RuntimeError("boom")
        assert flag_engine.get_overrides() == {}

    def test_rejected_value_rolls_back_applied_overrides(self, flag_engine: FlagEngine) -> None:
        with pytest.raises(TypeMismatchError):
            with override_flags(flag_engine, maintenanceMode=True, debugMode="nope"):
                pass
        assert flag_engine.get_overrides() == {}

    def test_unknown_flag_rolls_back_and_keeps_previous(self, flag_engine: FlagEngine) -> None:
        flag_engine.set_override("debugMode", True)
        with pytest.raises(UnknownFlagError):
            with override_flags(flag_engine, debugMode=False, ghost=True):
                pass
        assert flag_engine.get_overrides() == {"debugMode": True}


class TestFixtures:
    def test_flag_engine_is_isolated_from_process_env(
        self, flag_engine: FlagEngine, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FLAG_MAINTENANCEMODE", "true")
        assert flag_engine.get_environment() == "test"
        assert flag_engine.is_enabled("maintenanceMode") is False

    def test_flag_environ_feeds_engine(self, flag_engine: FlagEngine, flag_environ: dict[str, str]) -> None:
        flag_environ["FLAG_MAINTENANCEMODE"] = "1"
        assert flag_engine.get_flag("maintenanceMode").reason is EvaluationReason.OVERRIDE


class TestFakeFlagProvider:
    def test_configure_and_read(self, fake_flag_provider: FakeFlagProvider) -> None:
        fake_flag_provider.enable("a").disable("b").set("theme", "dark")

        async def run() -> dict[str, object]:
            await fake_flag_provider.initialize()
            assert await fake_flag_provider.get_flag("a") is True
            return await fake_flag_provider.get_all_flags()

        assert asyncio.run(run()) == {"a": True, "b": False, "theme": "dark"}
        assert fake_flag_provider.initialized

    def test_unknown_flag(self) -> None:
        with pytest.raises(UnknownFlagError):
            asyncio.run(FakeFlagProvider().get_flag("missing"))

    def test_reset_and_destroy(self) -> None:
        provider = FakeFlagProvider({"a": True})
        provider.reset()
        asyncio.run(provider.destroy())
        assert asyncio.run(provider.get_all_flags()) == {}
        assert provider.destroyed
