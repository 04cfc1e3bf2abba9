"""Feature-flag errors."""

from __future__ import annotations

from typing import Any

from mp_flags.errors.base import ForbiddenError, NotFoundError, ValidationError


class UnknownFlagError(NotFoundError):
    """A flag name was requested that the registry does not define.

    Always a caller bug: flag names are fixed when the registry is built.
    """

    default_code = "unknown_flag"

    def __init__(self, flag_name: str, **kwargs: Any) -> None:
        super().__init__("Flag", flag_name, detail={"flag_name": flag_name}, **kwargs)
        self.flag_name = flag_name


class TypeMismatchError(ValidationError):
    """A value cannot be used for a flag because its type differs from the
    flag's declared default type."""

    default_code = "type_mismatch"

    def __init__(
        self,
        flag_name: str,
        value: object,
        expected: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Value {value!r} for flag '{flag_name}' is not of type {expected}",
            detail={"flag_name": flag_name, "value": repr(value), "expected": expected},
            **kwargs,
        )
        self.flag_name = flag_name
        self.value = value
        self.expected = expected


class InvalidFlagDefinitionError(ValidationError):
    """A flag definition or rollout rule is malformed."""

    default_code = "invalid_flag_definition"


class FeatureDisabledError(ForbiddenError):
    """A gated operation was attempted while its flag is off."""

    default_code = "feature_disabled"

    def __init__(self, flag_name: str, **kwargs: Any) -> None:
        super().__init__(
            f'Feature "{flag_name}" is not enabled',
            detail={"flag_name": flag_name},
            **kwargs,
        )
        self.flag_name = flag_name


__all__ = [
    "FeatureDisabledError",
    "InvalidFlagDefinitionError",
    "TypeMismatchError",
    "UnknownFlagError",
]
