import re
from typing import Any

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from task_registry.core.domain.exceptions import TaskValidationError

INVALID_BODY_MESSAGE = "Request body must be a valid JSON object"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)
_JSON_OBJECT = TypeAdapter(dict[str, Any])


def parse_task_id(raw: str) -> int | None:
    """
    Reads the leading integer of a path segment ("12abc" -> 12).
    Returns None when the segment does not start with an ASCII number.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


async def read_json_object(request: Request) -> dict[str, Any]:
    """Request body as a dict. An empty body counts as an empty object."""
    body_bytes = await request.body()
    if not body_bytes.strip():
        return {}
    try:
        return _JSON_OBJECT.validate_json(body_bytes)
    except ValidationError as e:
        raise TaskValidationError(INVALID_BODY_MESSAGE) from e
