"""Structlog processor that shapes log events into the service log schema.

Flat structlog event_dict keys are moved into nested blocks:
root fields, ``processing``, ``error``, ``context`` and ``extra``.
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

EventDict = dict[str, Any]


def _build_root_fields(event_dict: EventDict, service: str, environment: str) -> EventDict:
    """Extract root-level fields: timestamp, level, service, environment, IDs."""
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": service,
        "environment": environment,
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


def _build_processing(event_dict: EventDict) -> EventDict | None:
    """Extract request outcome block."""
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "http_status": event_dict.pop("processing_http_status", None),
        "duration_ms": _safe_float(event_dict.pop("processing_duration_ms", None)),
    }


def _build_error(event_dict: EventDict) -> EventDict | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: EventDict) -> EventDict | None:
    """Extract request context block."""
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    component = event_dict.pop("context_component", None)
    if endpoint is None and method is None and component is None:
        return None
    return {
        "component": component,
        "endpoint": endpoint,
        "method": method,
    }


def build_schema_processor(
    service: str, environment: str
) -> Callable[[Any, str, EventDict], EventDict]:
    """Return a processor bound to the given service name and environment."""

    def schema_processor(
        logger: Any,  # noqa: ARG001
        method_name: str,  # noqa: ARG001
        event_dict: EventDict,
    ) -> EventDict:
        result = _build_root_fields(event_dict, service, environment)

        processing = _build_processing(event_dict)
        if processing is not None:
            result["processing"] = processing

        error = _build_error(event_dict)
        if error is not None:
            result["error"] = error

        context = _build_context(event_dict)
        if context is not None:
            result["context"] = context

        if event_dict:
            result["extra"] = dict(event_dict)

        return result

    return schema_processor
