"""Feature flags – EvaluationResult and EvaluationReason."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Generic

from mp_flags.feature_flags.definition import V


class EvaluationReason(str, Enum):
    """Which precedence tier produced an evaluated value."""

    OVERRIDE = "override"
    ENVIRONMENT = "environment"
    ROLLOUT = "rollout"
    ALLOWLIST = "allowlist"
    BLOCKLIST = "blocklist"
    DEFAULT = "default"


@dataclasses.dataclass(frozen=True)
class EvaluationResult(Generic[V]):
    """Outcome of evaluating one flag. Built fresh on every call."""

    value: V
    reason: EvaluationReason
    flag_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"flag_name": self.flag_name, "value": self.value, "reason": self.reason.value}


__all__ = ["EvaluationReason", "EvaluationResult"]
