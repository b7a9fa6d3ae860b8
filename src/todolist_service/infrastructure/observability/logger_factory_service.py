"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- build_renderer_chain(): final processors for the selected output format
- get_logger(): returns bound structlog logger
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from todolist_service.infrastructure.observability.logging.schema_processor import (
    structured_schema_processor,
)

_CONFIGURED = False

_DEPLOYED_ENVS = ("qa", "staging", "prod", "production")


def configure_logging(level: str = "INFO") -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    `level` filters both structlog events and stdlib records.
    Output format is selected by LOG_FORMAT env (json|console) or APP_ENV.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level_value = resolve_level(level)
    renderer_chain = build_renderer_chain()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[*shared_processors, *renderer_chain],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: uvicorn and sqlalchemy log through the same pipeline.
    # Logs go to stderr; stdout carries program output (the seeder report).
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            *renderer_chain,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level_value)


def resolve_level(level: str) -> int:
    """Map a level name (case-insensitive) to its numeric value; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger(context_component=component)


def build_renderer_chain() -> list[Any]:
    """Choose the final processors based on LOG_FORMAT env or APP_ENV.

    JSON output is reshaped by the structured schema processor first.
    Console output keeps the flat event dict so the message stays the headline.
    """
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return _json_chain()
    if log_format == "console":
        return [structlog.dev.ConsoleRenderer(colors=True)]

    env = os.environ.get("APP_ENV", "local").lower()
    if env in _DEPLOYED_ENVS:
        return _json_chain()
    return [structlog.dev.ConsoleRenderer(colors=True)]


def _json_chain() -> list[Any]:
    return [structured_schema_processor, structlog.processors.JSONRenderer()]
