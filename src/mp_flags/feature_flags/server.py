"""Feature flags – helpers for request handlers.

Usage in a request handler::

    flags = create_bound_flags(engine, request.user)
    if flags.is_enabled("betaFeatures"):
        ...

    require_flag_enabled(engine, "betaFeatures", request.user)
"""
from __future__ import annotations

from mp_flags.errors import FeatureDisabledError
from mp_flags.feature_flags.context import FlagContext, UserLike, build_flag_context
from mp_flags.feature_flags.definition import FlagValue
from mp_flags.feature_flags.engine import FlagEngine
from mp_flags.feature_flags.result import EvaluationResult


class BoundFlags:
    """An engine paired with one fixed evaluation context."""

    __slots__ = ("_context", "_engine")

    def __init__(self, engine: FlagEngine, context: FlagContext) -> None:
        self._engine = engine
        self._context = context

    @property
    def context(self) -> FlagContext:
        return self._context

    def get_flag(self, flag_name: str) -> EvaluationResult:
        return self._engine.get_flag(flag_name, self._context)

    def get_flag_value(self, flag_name: str) -> FlagValue:
        return self._engine.get_flag_value(flag_name, self._context)

    def is_enabled(self, flag_name: str) -> bool:
        return self._engine.is_enabled(flag_name, self._context)

    def get_all_flags(self) -> dict[str, FlagValue]:
        return self._engine.get_all_flags(self._context)


def _context_for(engine: FlagEngine, user: UserLike | FlagContext | None) -> FlagContext:
    if isinstance(user, FlagContext):
        return user
    return build_flag_context(user, environment=engine.get_environment())


def create_bound_flags(engine: FlagEngine, user: UserLike | FlagContext | None = None) -> BoundFlags:
    return BoundFlags(engine, _context_for(engine, user))


def get_flags_for_user(engine: FlagEngine, user: UserLike | None = None) -> dict[str, FlagValue]:
    """All flag values for *user*, e.g. to send to a client."""
    return engine.get_all_flags(_context_for(engine, user))


def is_flag_enabled_for_user(engine: FlagEngine, flag_name: str, user: UserLike | None = None) -> bool:
    return engine.is_enabled(flag_name, _context_for(engine, user))


def get_flag_for_user(engine: FlagEngine, flag_name: str, user: UserLike | None = None) -> EvaluationResult:
    return engine.get_flag(flag_name, _context_for(engine, user))


def require_flag_enabled(
    engine: FlagEngine,
    flag_name: str,
    user: UserLike | FlagContext | None = None,
) -> None:
    """Raise :class:`FeatureDisabledError` unless *flag_name* is on for *user*.

    *user* may also be a ready-made :class:`FlagContext`.
    """
    if not engine.is_enabled(flag_name, _context_for(engine, user)):
        raise FeatureDisabledError(flag_name)


class FlagAdmin:
    """Operator shortcuts over an engine's runtime overrides."""

    def __init__(self, engine: FlagEngine) -> None:
        self._engine = engine

    def enable(self, flag_name: str) -> None:
        self._engine.set_override(flag_name, True)

    def disable(self, flag_name: str) -> None:
        self._engine.set_override(flag_name, False)

    def reset(self, flag_name: str) -> None:
        """Drop the override so normal precedence applies again."""
        self._engine.clear_override(flag_name)

    def reset_all(self) -> None:
        self._engine.clear_all_overrides()

    def set_environment(self, environment: str) -> None:
        self._engine.set_environment(environment)


__all__ = [
    "BoundFlags",
    "FlagAdmin",
    "create_bound_flags",
    "get_flag_for_user",
    "get_flags_for_user",
    "is_flag_enabled_for_user",
    "require_flag_enabled",
]
