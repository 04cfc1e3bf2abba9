"""Feature flags – FlagDefinition and RolloutRule value objects."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar, Union

from mp_flags.errors import InvalidFlagDefinitionError

FlagValue = Union[bool, int, float, str]

V = TypeVar("V", bool, int, float, str)

BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"


def value_kind(value: object) -> str:
    """Return the type family of a flag value: ``boolean``, ``number`` or ``string``.

    ``bool`` is checked before ``int`` since it subclasses it.

    Raises:
        TypeError: *value* is not a scalar flag value.
    """
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    raise TypeError(f"{type(value).__name__} is not a flag value type")


def _as_id_set(name: str, ids: Iterable[str]) -> frozenset[str]:
    if isinstance(ids, str):
        raise InvalidFlagDefinitionError(f"Rollout {name} must be a collection of identifiers, not a string")
    result = frozenset(ids)
    for item in result:
        if not isinstance(item, str):
            raise InvalidFlagDefinitionError(f"Rollout {name} entry {item!r} is not a string")
    return result


@dataclasses.dataclass(frozen=True)
class RolloutRule:
    """Percentage rollout with explicit allow and block lists.

    ``percentage`` is the share of *identified* contexts that get the enabled
    value. Identifiers are user ids, organization ids or emails, whichever
    the caller supplies.
    """

    percentage: int = 0
    allowlist: frozenset[str] = frozenset()
    blocklist: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if isinstance(self.percentage, bool) or not isinstance(self.percentage, int):
            raise InvalidFlagDefinitionError(
                f"Rollout percentage must be an integer, got {self.percentage!r}"
            )
        if not 0 <= self.percentage <= 100:
            raise InvalidFlagDefinitionError(
                f"Rollout percentage must be within [0, 100], got {self.percentage}"
            )
        object.__setattr__(self, "allowlist", _as_id_set("allowlist", self.allowlist))
        object.__setattr__(self, "blocklist", _as_id_set("blocklist", self.blocklist))


@dataclasses.dataclass(frozen=True)
class FlagDefinition(Generic[V]):
    """A named flag's default value and targeting rules.

    The value type is fixed by ``default_value``; every entry of
    ``environments`` must belong to the same type family (``int`` and
    ``float`` are both numbers).

    Example::

        FlagDefinition(
            default_value=False,
            description="Enable the redesigned dashboard UI",
            rollout=RolloutRule(percentage=10),
            environments={"development": True},
        )
    """

    default_value: V
    description: str = ""
    rollout: RolloutRule | None = None
    environments: Mapping[str, V] = dataclasses.field(default_factory=dict)

    # unhashable: environments is a mapping proxy
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        try:
            kind = value_kind(self.default_value)
        except TypeError as exc:
            raise InvalidFlagDefinitionError(
                f"Unsupported default value {self.default_value!r}", cause=exc
            ) from exc
        if self.rollout is not None and not isinstance(self.rollout, RolloutRule):
            raise InvalidFlagDefinitionError(f"rollout must be a RolloutRule, got {self.rollout!r}")
        environments = dict(self.environments)
        for env, value in environments.items():
            if _kind_or_none(value) != kind:
                raise InvalidFlagDefinitionError(
                    f"Environment value {value!r} for '{env}' does not match default type {kind}",
                    detail={"environment": env},
                )
        object.__setattr__(self, "environments", MappingProxyType(environments))

    @property
    def kind(self) -> str:
        return value_kind(self.default_value)

    @property
    def is_boolean(self) -> bool:
        return self.kind == BOOLEAN


def _kind_or_none(value: object) -> str | None:
    try:
        return value_kind(value)
    except TypeError:
        return None


__all__ = [
    "BOOLEAN",
    "NUMBER",
    "STRING",
    "FlagDefinition",
    "FlagValue",
    "RolloutRule",
    "value_kind",
]
