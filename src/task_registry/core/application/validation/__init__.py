from task_registry.core.application.validation.task_payload_validator import (
    validate_new_task,
    validate_priority_level,
    validate_task_patch,
)
from task_registry.core.application.validation.validation_result import ValidationResult

__all__ = [
    "ValidationResult",
    "validate_new_task",
    "validate_priority_level",
    "validate_task_patch",
]
