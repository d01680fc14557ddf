"""Structlog configuration for the storefront service.

Every event carries the service name and deployment environment. Development
runs get colored console output; production runs emit one JSON object per line.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

from infrastructure.settings import StorefrontSettings

SERVICE_NAME = "shopfront"


def _service_fields(environment: str) -> structlog.types.Processor:
    def add_service_fields(
        logger: structlog.types.WrappedLogger,
        method_name: str,
        event_dict: structlog.types.EventDict,
    ) -> structlog.types.EventDict:
        event_dict.setdefault("service", SERVICE_NAME)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_service_fields


def _wants_console(settings: StorefrontSettings) -> bool:
    # FORCE_COLOR=1 enables colors even in non-TTY environments (like Docker)
    if os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes"):
        return True
    return not settings.is_production and sys.stdout.isatty()


def configure_logging(settings: StorefrontSettings) -> None:
    """Configure structlog from the storefront settings.

    Events below ``settings.log_level`` are dropped. Production always
    renders JSON unless FORCE_COLOR is set.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _service_fields(settings.environment),
        structlog.processors.StackInfoRenderer(),
    ]

    if _wants_console(settings):
        renderer: list[structlog.types.Processor] = [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        renderer = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
