"""Feature flags – rollout evaluation (blocklist, allowlist, percentage)."""
from __future__ import annotations

from mp_flags.feature_flags.context import FlagContext
from mp_flags.feature_flags.definition import FlagDefinition, FlagValue
from mp_flags.feature_flags.hashing import bucket, rollout_key
from mp_flags.feature_flags.result import EvaluationReason, EvaluationResult


def enabled_value(definition: FlagDefinition) -> FlagValue:
    """Value served to contexts inside a rollout.

    ``True`` for boolean flags. Non-boolean flags have no separate "on"
    value, so their default is returned unchanged: allowlisting or rolling
    out a string/number flag changes the reason but not the value.
    """
    return True if definition.is_boolean else definition.default_value


def evaluate_rollout(
    definition: FlagDefinition,
    flag_name: str,
    context: FlagContext | None,
) -> EvaluationResult | None:
    """Apply *definition*'s rollout rule to *context*.

    Returns ``None`` when the rule does not decide the value: there is no
    rule, the context is anonymous, or the identifier falls outside the
    percentage bucket.
    """
    rule = definition.rollout
    if rule is None or context is None:
        return None
    identifier = context.identifier
    if identifier is None:
        return None

    if identifier in rule.blocklist:
        return EvaluationResult(definition.default_value, EvaluationReason.BLOCKLIST, flag_name)
    if identifier in rule.allowlist:
        return EvaluationResult(enabled_value(definition), EvaluationReason.ALLOWLIST, flag_name)
    if bucket(rollout_key(flag_name, identifier)) < rule.percentage:
        return EvaluationResult(enabled_value(definition), EvaluationReason.ROLLOUT, flag_name)
    return None


__all__ = ["enabled_value", "evaluate_rollout"]
