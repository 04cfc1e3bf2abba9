"""Observability – structlog configuration."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import structlog

from mp_flags.config import EnvSettingsLoader, FlagSettings
from mp_flags.observability.logging.filters import SensitiveFieldsFilter


def configure_logging(
    level: int = logging.INFO,
    sensitive_fields: frozenset[str] | None = None,
) -> None:
    """Configure structlog to render JSON through the stdlib root logger.

    Every event passes through a :class:`SensitiveFieldsFilter` first, so
    context fields such as ``email`` never reach the output.
    """
    shared_processors: list[Any] = [
        SensitiveFieldsFilter(sensitive_fields),
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging_from_settings(
    settings: FlagSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> FlagSettings:
    """Configure logging at ``FLAGS_LOG_LEVEL`` and return the settings used.

    Meant for process start-up, ahead of :meth:`FlagEngine.from_settings`::

        settings = configure_logging_from_settings()
        engine = FlagEngine.from_settings(default_flag_definitions(), settings)
    """
    if settings is None:
        settings = EnvSettingsLoader(environ).load(FlagSettings)
    configure_logging(settings.log_level_number)
    return settings


__all__ = ["configure_logging", "configure_logging_from_settings"]
