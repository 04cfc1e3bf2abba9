"""Feature flags – definitions, registry and the evaluation engine."""
from mp_flags.feature_flags.context import FlagContext, UserLike, build_flag_context
from mp_flags.feature_flags.defaults import default_flag_definitions
from mp_flags.feature_flags.definition import FlagDefinition, FlagValue, RolloutRule, value_kind
from mp_flags.feature_flags.engine import DEFAULT_ENVIRONMENT, FlagEngine
from mp_flags.feature_flags.external import external_key, parse_external_value
from mp_flags.feature_flags.hashing import bucket, rollout_key
from mp_flags.feature_flags.provider import EngineFlagProvider, FlagProvider
from mp_flags.feature_flags.registry import FlagRegistry
from mp_flags.feature_flags.result import EvaluationReason, EvaluationResult
from mp_flags.feature_flags.rollout import enabled_value, evaluate_rollout
from mp_flags.feature_flags.server import (
    BoundFlags,
    FlagAdmin,
    create_bound_flags,
    get_flag_for_user,
    get_flags_for_user,
    is_flag_enabled_for_user,
    require_flag_enabled,
)
from mp_flags.feature_flags.snapshot import FlagSnapshot, snapshot_flags

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "BoundFlags",
    "EngineFlagProvider",
    "EvaluationReason",
    "EvaluationResult",
    "FlagAdmin",
    "FlagContext",
    "FlagDefinition",
    "FlagEngine",
    "FlagProvider",
    "FlagRegistry",
    "FlagSnapshot",
    "FlagValue",
    "RolloutRule",
    "UserLike",
    "bucket",
    "build_flag_context",
    "create_bound_flags",
    "default_flag_definitions",
    "enabled_value",
    "evaluate_rollout",
    "external_key",
    "get_flag_for_user",
    "get_flags_for_user",
    "is_flag_enabled_for_user",
    "parse_external_value",
    "require_flag_enabled",
    "rollout_key",
    "snapshot_flags",
    "value_kind",
]
