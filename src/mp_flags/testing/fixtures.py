"""Testing fixtures – pytest fixtures for flag engines.

Enable them from a ``conftest.py``::

    pytest_plugins = ["mp_flags.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from mp_flags.feature_flags import FlagEngine, default_flag_definitions
from mp_flags.testing.fakes import FakeFlagProvider


@pytest.fixture
def flag_environ() -> dict[str, str]:
    """Mutable stand-in for ``os.environ`` used as the engine's external lookup.

    Put ``FLAG_*`` keys here to exercise external overrides::

        def test_env_override(flag_engine, flag_environ):
            flag_environ["FLAG_BETAFEATURES"] = "true"
    """
    return {}


@pytest.fixture
def flag_engine(flag_environ: dict[str, str]) -> FlagEngine:
    """Fresh :class:`FlagEngine` over the sample definitions, environment ``test``.

    The process environment is never read, so ``FLAG_*`` variables set on the
    test runner cannot leak into results.
    """
    return FlagEngine(default_flag_definitions(), environment="test", external=flag_environ)


@pytest.fixture
def fake_flag_provider() -> FakeFlagProvider:
    return FakeFlagProvider()


__all__ = ["fake_flag_provider", "flag_engine", "flag_environ"]
