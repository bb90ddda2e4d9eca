from task_registry.infrastructure.entrypoints.api.dtos.task_response_dto import (
    TaskResponseDTO,
    to_iso_timestamp,
)

__all__ = [
    "TaskResponseDTO",
    "to_iso_timestamp",
]
