"""Observability – logging for flag evaluation."""
from mp_flags.observability.logging import configure_logging, configure_logging_from_settings, get_logger

__all__ = ["configure_logging", "configure_logging_from_settings", "get_logger"]
