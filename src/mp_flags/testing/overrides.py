"""Testing – temporary flag overrides."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator

from mp_flags.feature_flags.definition import FlagValue
from mp_flags.feature_flags.engine import FlagEngine


@contextlib.contextmanager
def override_flags(engine: FlagEngine, **values: FlagValue) -> Iterator[FlagEngine]:
    """Apply runtime overrides for the duration of a ``with`` block.

    Overrides that existed before the block are restored afterwards, and
    flags that had none are cleared again. This also holds when one of
    *values* is rejected before the block runs.

    Usage::

        with override_flags(engine, maintenanceMode=True):
            assert engine.is_enabled("maintenanceMode")
    """
    previous = dict(engine.get_overrides())
    try:
        for name, value in values.items():
            engine.set_override(name, value)
        yield engine
    finally:
        for name in values:
            if name in previous:
                engine.set_override(name, previous[name])
            else:
                engine.clear_override(name)


__all__ = ["override_flags"]
