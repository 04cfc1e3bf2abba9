"""Feature flags – FlagSnapshot for shipping evaluated flags to a client."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from mp_flags.feature_flags.context import FlagContext
from mp_flags.feature_flags.definition import FlagValue

if TYPE_CHECKING:
    from mp_flags.feature_flags.engine import FlagEngine


@dataclasses.dataclass(frozen=True)
class FlagSnapshot:
    """Read-only flag values for one context plus the environment they were
    evaluated in."""

    flags: Mapping[str, FlagValue]
    environment: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    def to_dict(self) -> dict[str, Any]:
        return {"environment": self.environment, "flags": dict(self.flags)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, sort_keys=True)


def snapshot_flags(engine: FlagEngine, context: FlagContext | None = None) -> FlagSnapshot:
    """Evaluate all flags of *engine* for *context* into a :class:`FlagSnapshot`."""
    return engine.snapshot(context)


__all__ = ["FlagSnapshot", "snapshot_flags"]
