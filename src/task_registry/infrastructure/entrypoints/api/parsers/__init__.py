from task_registry.infrastructure.entrypoints.api.parsers.request_parsers import (
    parse_task_id,
    read_json_object,
)

__all__ = [
    "parse_task_id",
    "read_json_object",
]
