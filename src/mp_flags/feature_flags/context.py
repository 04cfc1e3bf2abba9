"""Feature flags – FlagContext and the context builder.

A :class:`FlagContext` is the only thing the engine knows about the caller.
Request middleware builds one per request with :func:`build_flag_context`
from whatever user object it has authenticated.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from mp_flags.feature_flags.definition import FlagValue


@runtime_checkable
class UserLike(Protocol):
    """Minimal shape of an authenticated user."""

    id: str


@dataclasses.dataclass(frozen=True)
class FlagContext:
    """Attributes of the caller used to target rollout rules."""

    user_id: str | None = None
    email: str | None = None
    organization_id: str | None = None
    environment: str | None = None
    attributes: Mapping[str, FlagValue] = dataclasses.field(default_factory=dict)

    # unhashable: attributes is a mapping proxy
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def identifier(self) -> str | None:
        """First of ``user_id``, ``organization_id``, ``email`` that is set.

        Only ``None`` falls through to the next field: a context whose
        ``user_id`` is ``""`` has no identifier even when it carries an
        email. ``None`` means the context is anonymous and rollout rules
        never apply to it.
        """
        for candidate in (self.user_id, self.organization_id, self.email):
            if candidate is not None:
                return candidate or None
        return None

    @property
    def is_anonymous(self) -> bool:
        return self.identifier is None

    def merge(self, other: FlagContext) -> FlagContext:
        """Return a new context where *other*'s set fields win.

        Attributes are merged key by key rather than replaced.
        """
        changes: dict[str, Any] = {
            f.name: getattr(other, f.name)
            for f in dataclasses.fields(other)
            if f.name != "attributes" and getattr(other, f.name) is not None
        }
        changes["attributes"] = {**self.attributes, **other.attributes}
        return dataclasses.replace(self, **changes)


def build_flag_context(user: UserLike | None, environment: str | None = None) -> FlagContext:
    """Build a :class:`FlagContext` from a user-like object.

    *user* needs an ``id``; ``email`` and ``organization_id`` are read when
    present. ``None`` yields an anonymous context.
    """
    if user is None:
        return FlagContext(environment=environment)
    return FlagContext(
        user_id=str(user.id),
        email=getattr(user, "email", None) or None,
        organization_id=getattr(user, "organization_id", None) or None,
        environment=environment,
    )


__all__ = ["FlagContext", "UserLike", "build_flag_context"]
