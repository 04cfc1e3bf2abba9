"""Feature flags – per-flag overrides read from external configuration.

A flag named ``newDashboard`` is overridden by the key ``FLAG_NEWDASHBOARD``;
``beta-features`` by ``FLAG_BETA_FEATURES``.
"""
from __future__ import annotations

import math
import re

from mp_flags.errors import TypeMismatchError
from mp_flags.feature_flags.definition import BOOLEAN, NUMBER, FlagDefinition, FlagValue

DEFAULT_PREFIX = "FLAG_"

_NON_ALNUM = re.compile(r"[^A-Z0-9]")
_TRUE_VALUES = frozenset({"true", "1"})


def external_key(flag_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Upper-case *flag_name*, replace non-alphanumerics with ``_`` and prefix it."""
    return prefix + _NON_ALNUM.sub("_", flag_name.upper())


def parse_external_value(definition: FlagDefinition, flag_name: str, raw: str) -> FlagValue:
    """Parse *raw* according to the type of the flag's default value.

    Booleans: exactly ``"true"`` or ``"1"`` are true, anything else (``"TRUE"``
    and ``" 1"`` included) is false. Numbers: ``int`` defaults accept integers
    and fall back to floats; ``float`` defaults accept floats. Strings are
    taken verbatim.

    Raises:
        TypeMismatchError: a number flag received non-numeric text.
    """
    kind = definition.kind
    if kind == BOOLEAN:
        return raw in _TRUE_VALUES
    if kind == NUMBER:
        text = raw.strip()
        if isinstance(definition.default_value, int):
            try:
                return int(text)
            except ValueError:
                pass
        try:
            number = float(text)
        except ValueError as exc:
            raise TypeMismatchError(flag_name, raw, NUMBER, cause=exc) from exc
        if not math.isfinite(number):
            raise TypeMismatchError(flag_name, raw, NUMBER)
        return number
    return raw


__all__ = ["DEFAULT_PREFIX", "external_key", "parse_external_value"]
