from task_registry.core.domain.exceptions.task_not_found_error import TaskNotFoundError
from task_registry.core.domain.exceptions.task_registry_error import TaskRegistryError
from task_registry.core.domain.exceptions.task_validation_error import TaskValidationError

__all__ = [
    "TaskNotFoundError",
    "TaskRegistryError",
    "TaskValidationError",
]
