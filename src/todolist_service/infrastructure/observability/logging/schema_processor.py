"""Structured log schema processor for structlog.

Reshapes the flat structlog event_dict into nested blocks
(processing, error, event, context) so every log line shares one layout.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

import os
from typing import Any
from uuid import uuid4


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract root-level fields: timestamp, level, service, environment, IDs."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "todolist-service"),
        "environment": os.environ.get("APP_ENV", "local"),
        "trace_id": event_dict.pop("trace_id", None),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
        "http_status": event_dict.pop("processing_http_status", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_event_block(event_dict: dict[str, Any]) -> dict[str, Any]:
    """Extract event identification block."""
    return {
        "eventId": event_dict.pop("event_id", str(uuid4())),
        "eventType": event_dict.pop("event_type", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract request/execution context block."""
    component = event_dict.pop("context_component", None)
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    if component is None and endpoint is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": method,
    }


def structured_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that reshapes flat event_dict into the nested schema."""
    result = _build_root_fields(event_dict)

    processing = _build_processing(event_dict)
    if processing is not None:
        result["processing"] = processing

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    result["event"] = _build_event_block(event_dict)

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
