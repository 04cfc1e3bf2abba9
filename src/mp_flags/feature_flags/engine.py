"""Feature flags – FlagEngine, the in-process evaluation engine.

Precedence, first match wins:

1. runtime override (:meth:`FlagEngine.set_override`)
2. external-config override (``FLAG_<NAME>`` key in the external lookup)
3. value for the current environment in the definition's ``environments``
4. rollout rule (blocklist, allowlist, percentage bucket)
5. the definition's default value

Each engine owns its overrides and environment, so independent engines
(e.g. one per test) never see each other's state.
"""
from __future__ import annotations

import dataclasses
import os
import threading
from collections.abc import Mapping
from types import MappingProxyType

from mp_flags.config import EnvSettingsLoader, FlagSettings, InvalidEnvironmentError
from mp_flags.errors import TypeMismatchError, UnknownFlagError
from mp_flags.feature_flags.context import FlagContext
from mp_flags.feature_flags.definition import FlagDefinition, FlagValue, value_kind
from mp_flags.feature_flags.external import DEFAULT_PREFIX, external_key, parse_external_value
from mp_flags.feature_flags.registry import FlagRegistry
from mp_flags.feature_flags.result import EvaluationReason, EvaluationResult
from mp_flags.feature_flags.rollout import evaluate_rollout
from mp_flags.feature_flags.snapshot import FlagSnapshot
from mp_flags.observability.logging import get_logger

DEFAULT_ENVIRONMENT = "development"

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class _EngineState:
    environment: str
    overrides: Mapping[str, FlagValue]


class FlagEngine:
    """Resolve flag values for an evaluation context and explain why.

    Parameters
    ----------
    definitions:
        A :class:`FlagRegistry` or a plain mapping of name to
        :class:`FlagDefinition`.
    environment:
        Initial environment label (default ``"development"``).
    external:
        Text lookup for per-flag overrides. Defaults to :data:`os.environ`;
        pass ``{}`` to disable the layer.
    external_prefix:
        Prefix of the external override keys.

    The overrides and environment are swapped as one immutable snapshot
    under a lock; evaluations read the snapshot once, so a concurrent
    :meth:`set_override` is seen either entirely or not at all.
    """

    def __init__(
        self,
        definitions: FlagRegistry | Mapping[str, FlagDefinition],
        *,
        environment: str = DEFAULT_ENVIRONMENT,
        external: Mapping[str, str] | None = None,
        external_prefix: str = DEFAULT_PREFIX,
    ) -> None:
        _check_environment(environment)
        self._registry = definitions if isinstance(definitions, FlagRegistry) else FlagRegistry(definitions)
        self._external: Mapping[str, str] = os.environ if external is None else external
        self._external_prefix = external_prefix
        self._state_mu = threading.RLock()
        self._state = _EngineState(environment=environment, overrides=MappingProxyType({}))

    @classmethod
    def from_settings(
        cls,
        definitions: FlagRegistry | Mapping[str, FlagDefinition],
        settings: FlagSettings | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> FlagEngine:
        """Build an engine configured from ``FLAGS_*`` settings.

        *environ* (default :data:`os.environ`) is used both to load the
        settings and as the external override lookup.
        """
        environ = os.environ if environ is None else environ
        if settings is None:
            settings = EnvSettingsLoader(environ).load(FlagSettings)
        return cls(
            definitions,
            environment=settings.environment,
            external=environ if settings.external_overrides else {},
            external_prefix=settings.external_prefix,
        )

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def get_flag(self, flag_name: str, context: FlagContext | None = None) -> EvaluationResult:
        """Evaluate *flag_name* for *context*.

        Raises:
            UnknownFlagError: *flag_name* is not registered.
        """
        definition = self._require(flag_name)
        return self._evaluate(flag_name, definition, self._snapshot(), context)

    def get_flag_value(self, flag_name: str, context: FlagContext | None = None) -> FlagValue:
        return self.get_flag(flag_name, context).value

    def is_enabled(self, flag_name: str, context: FlagContext | None = None) -> bool:
        """Truthiness of the flag's value; meant for boolean flags."""
        return bool(self.get_flag_value(flag_name, context))

    def get_all_flags(self, context: FlagContext | None = None) -> dict[str, FlagValue]:
        """Evaluate every registered flag against one context and one state snapshot."""
        return dict(self.snapshot(context).flags)

    def snapshot(self, context: FlagContext | None = None) -> FlagSnapshot:
        """Like :meth:`get_all_flags`, paired with the environment it ran in."""
        state = self._snapshot()
        flags = {
            name: self._evaluate(name, definition, state, context).value
            for name, definition in self._registry.items()
        }
        return FlagSnapshot(flags=flags, environment=state.environment)

    def _evaluate(
        self,
        flag_name: str,
        definition: FlagDefinition,
        state: _EngineState,
        context: FlagContext | None,
    ) -> EvaluationResult:
        return (
            self._from_override(flag_name, state)
            or self._from_external(flag_name, definition)
            or self._from_environment(flag_name, definition, state)
            or evaluate_rollout(definition, flag_name, context)
            or EvaluationResult(definition.default_value, EvaluationReason.DEFAULT, flag_name)
        )

    @staticmethod
    def _from_override(flag_name: str, state: _EngineState) -> EvaluationResult | None:
        if flag_name in state.overrides:
            return EvaluationResult(state.overrides[flag_name], EvaluationReason.OVERRIDE, flag_name)
        return None

    def _from_external(self, flag_name: str, definition: FlagDefinition) -> EvaluationResult | None:
        key = external_key(flag_name, self._external_prefix)
        raw = self._external.get(key)
        if raw is None:
            return None
        try:
            value = parse_external_value(definition, flag_name, raw)
        except TypeMismatchError as exc:
            _log.warning("flag_external_value_invalid", flag=flag_name, key=key, error=exc.to_dict())
            return None
        return EvaluationResult(value, EvaluationReason.OVERRIDE, flag_name)

    @staticmethod
    def _from_environment(
        flag_name: str, definition: FlagDefinition, state: _EngineState
    ) -> EvaluationResult | None:
        if state.environment in definition.environments:
            return EvaluationResult(
                definition.environments[state.environment], EvaluationReason.ENVIRONMENT, flag_name
            )
        return None

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def set_override(self, flag_name: str, value: FlagValue) -> None:
        """Force *flag_name* to *value* until cleared.

        Raises:
            UnknownFlagError: *flag_name* is not registered.
            TypeMismatchError: *value* is not of the flag's type.
        """
        definition = self._require(flag_name)
        try:
            kind = value_kind(value)
        except TypeError:
            kind = None
        if kind != definition.kind:
            raise TypeMismatchError(flag_name, value, definition.kind)
        with self._state_mu:
            overrides = {**self._state.overrides, flag_name: value}
            self._state = dataclasses.replace(self._state, overrides=MappingProxyType(overrides))
        _log.info("flag_override_set", flag=flag_name, value=value)

    def clear_override(self, flag_name: str) -> None:
        """Remove the runtime override of *flag_name*, if any."""
        with self._state_mu:
            if flag_name not in self._state.overrides:
                return
            overrides = {k: v for k, v in self._state.overrides.items() if k != flag_name}
            self._state = dataclasses.replace(self._state, overrides=MappingProxyType(overrides))
        _log.info("flag_override_cleared", flag=flag_name)

    def clear_all_overrides(self) -> None:
        with self._state_mu:
            self._state = dataclasses.replace(self._state, overrides=MappingProxyType({}))
        _log.info("flag_overrides_cleared")

    def get_overrides(self) -> Mapping[str, FlagValue]:
        """Read-only view of the current runtime overrides."""
        return self._snapshot().overrides

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    def set_environment(self, environment: str) -> None:
        """Switch the environment used by subsequent evaluations."""
        _check_environment(environment)
        with self._state_mu:
            previous = self._state.environment
            self._state = dataclasses.replace(self._state, environment=environment)
        _log.info("flag_environment_changed", previous=previous, environment=environment)

    def get_environment(self) -> str:
        return self._snapshot().environment

    @property
    def environment(self) -> str:
        return self.get_environment()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_definitions(self) -> FlagRegistry:
        """The registry this engine evaluates (read-only)."""
        return self._registry

    def names(self) -> tuple[str, ...]:
        return self._registry.names()

    def __contains__(self, flag_name: object) -> bool:
        return flag_name in self._registry

    def __repr__(self) -> str:
        state = self._snapshot()
        return (
            f"FlagEngine(flags={len(self._registry)}, environment={state.environment!r}, "
            f"overrides={len(state.overrides)})"
        )

    def _snapshot(self) -> _EngineState:
        with self._state_mu:
            return self._state

    def _require(self, flag_name: str) -> FlagDefinition:
        try:
            return self._registry.require(flag_name)
        except UnknownFlagError:
            _log.error("flag_unknown", flag=flag_name)
            raise


def _check_environment(environment: str) -> None:
    if not isinstance(environment, str) or not environment.strip():
        raise InvalidEnvironmentError(environment)


__all__ = ["DEFAULT_ENVIRONMENT", "FlagEngine"]
