"""Feature flags – stable bucketing hash for percentage rollouts.

Python's built-in :func:`hash` is salted per process, so it cannot be used
here: a user must land in the same bucket on every run and every host.
"""
from __future__ import annotations

from collections.abc import Iterator

BUCKETS = 100

_MASK_32 = 0xFFFFFFFF
_SIGN_32 = 0x80000000


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - (1 << 32) if value & _SIGN_32 else value


def _utf16_units(value: str) -> Iterator[int]:
    data = value.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def string_hash32(value: str) -> int:
    """Polynomial rolling hash (``h * 31 + c``) folded to a signed 32-bit int.

    Runs over UTF-16 code units so that buckets agree with JavaScript clients
    hashing the same key with ``charCodeAt``.
    """
    h = 0
    for unit in _utf16_units(value):
        h = _to_int32((h << 5) - h + unit)
    return h


def bucket(value: str) -> int:
    """Map *value* to a bucket in ``[0, 99]``."""
    return abs(string_hash32(value)) % BUCKETS


def rollout_key(flag_name: str, identifier: str) -> str:
    """Hash input for a flag/identifier pair.

    Including the flag name gives each flag an independent bucket for the
    same identifier.
    """
    return f"{flag_name}:{identifier}"


__all__ = ["BUCKETS", "bucket", "rollout_key", "string_hash32"]
