"""Structlog-based logging configuration with the service log schema and stdlib bridge.

Provides:
- configure_logging(): structlog + stdlib setup
- get_logger(): returns bound structlog logger
- LoggerFactoryService: facade used by the rest of the package
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from task_registry.infrastructure.observability.logging.schema_processor import (
    build_schema_processor,
)

SERVICE_NAME = "task-registry"
JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")

_CONFIGURED = False


def configure_logging(
    level: str = "INFO",
    log_format: str | None = None,
    env: str = "local",
    force: bool = False,
) -> None:
    """structlog + stdlib bridge configuration.

    Only the first call takes effect unless ``force`` is set; the app factory
    forces it so settings always win over the import-time defaults.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED and not force:
        return
    _CONFIGURED = True

    renderer = _select_renderer(log_format, env)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        build_schema_processor(SERVICE_NAME, env),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Stdlib bridge: route logging.getLogger() output through the structlog pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger().bind(context_component=component)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _select_renderer(log_format: str | None, env: str) -> Any:
    """Choose renderer from the explicit format, falling back to the environment."""
    fmt = (log_format or "").lower()
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False, event_key="message")

    if env.lower() in JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False, event_key="message")


class LoggerFactoryService:
    """Facade kept for module-level loggers."""

    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Return a stdlib logger (routed through structlog via ProcessorFormatter)."""
        configure_logging()
        return logging.getLogger(name)
