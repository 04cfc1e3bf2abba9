"""Testing utilities – fakes and override helpers.

Pytest fixtures live in :mod:`mp_flags.testing.fixtures` and Hypothesis
strategies in :mod:`mp_flags.testing.strategies`; both need the ``testing``
extra and are imported explicitly.
"""
from mp_flags.testing.fakes import FakeFlagProvider
from mp_flags.testing.overrides import override_flags

__all__ = ["FakeFlagProvider", "override_flags"]
