"""Feature flags – FlagRegistry."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from mp_flags.errors import InvalidFlagDefinitionError, UnknownFlagError
from mp_flags.feature_flags.definition import FlagDefinition, RolloutRule


class FlagRegistry(Mapping[str, FlagDefinition]):
    """Immutable, insertion-ordered mapping of flag name to definition.

    Built once and shared by an engine for its whole lifetime.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Mapping[str, FlagDefinition] | None = None) -> None:
        checked: dict[str, FlagDefinition] = {}
        for name, definition in (definitions or {}).items():
            if not isinstance(name, str) or not name:
                raise InvalidFlagDefinitionError(f"Flag name must be a non-empty string, got {name!r}")
            if not isinstance(definition, FlagDefinition):
                raise InvalidFlagDefinitionError(
                    f"Definition for '{name}' must be a FlagDefinition, got {type(definition).__name__}",
                    detail={"flag_name": name},
                )
            checked[name] = definition
        self._definitions = MappingProxyType(checked)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> FlagRegistry:
        """Build a registry from plain dicts, e.g. parsed JSON or YAML::

            FlagRegistry.from_dict({
                "betaFeatures": {
                    "default_value": False,
                    "rollout": {"percentage": 10, "allowlist": ["user-42"]},
                },
            })
        """
        definitions: dict[str, FlagDefinition] = {}
        for name, entry in raw.items():
            fields = dict(entry)
            rollout = fields.pop("rollout", None)
            if isinstance(rollout, Mapping):
                rollout = RolloutRule(
                    percentage=rollout.get("percentage", 0),
                    allowlist=frozenset(rollout.get("allowlist", ())),
                    blocklist=frozenset(rollout.get("blocklist", ())),
                )
            try:
                definitions[name] = FlagDefinition(rollout=rollout, **fields)
            except TypeError as exc:
                raise InvalidFlagDefinitionError(
                    f"Malformed definition for '{name}': {exc}", detail={"flag_name": name}, cause=exc
                ) from exc
        return cls(definitions)

    def require(self, name: str) -> FlagDefinition:
        """Return the definition for *name* or raise :class:`UnknownFlagError`."""
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownFlagError(name) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def __getitem__(self, name: str) -> FlagDefinition:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"FlagRegistry({list(self._definitions)!r})"


__all__ = ["FlagRegistry"]
