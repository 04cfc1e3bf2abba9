"""Feature flags – FlagProvider port and the engine-backed adapter."""
from __future__ import annotations

import abc
from typing import Any

from mp_flags.feature_flags.context import FlagContext
from mp_flags.feature_flags.definition import FlagValue
from mp_flags.feature_flags.engine import FlagEngine


class FlagProvider(abc.ABC):
    """Port: a source of flag values.

    Implement this to put an external flag service behind the same surface
    as the in-process engine.
    """

    async def initialize(self) -> None:  # noqa: B027
        """Acquire resources. No-op by default."""

    @abc.abstractmethod
    async def get_flag(self, flag_name: str, context: FlagContext | None = None) -> Any: ...

    @abc.abstractmethod
    async def get_all_flags(self, context: FlagContext | None = None) -> dict[str, Any]: ...

    async def destroy(self) -> None:  # noqa: B027
        """Release resources. No-op by default."""


class EngineFlagProvider(FlagProvider):
    """:class:`FlagProvider` backed by an in-process :class:`FlagEngine`."""

    def __init__(self, engine: FlagEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> FlagEngine:
        return self._engine

    async def get_flag(self, flag_name: str, context: FlagContext | None = None) -> FlagValue:
        return self._engine.get_flag_value(flag_name, context)

    async def get_all_flags(self, context: FlagContext | None = None) -> dict[str, FlagValue]:
        return self._engine.get_all_flags(context)


__all__ = ["EngineFlagProvider", "FlagProvider"]
