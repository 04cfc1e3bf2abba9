"""Observability – structured logging helpers."""
from mp_flags.observability.logging.factory import configure_logging, configure_logging_from_settings
from mp_flags.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mp_flags.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "SensitiveFieldsFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
