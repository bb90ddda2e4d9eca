from __future__ import annotations

from task_registry.core.domain.exceptions.task_registry_error import TaskRegistryError

TASK_NOT_FOUND_MESSAGE = "Task not found"


class TaskNotFoundError(TaskRegistryError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: int | None = None) -> None:
        super().__init__(TASK_NOT_FOUND_MESSAGE)
        self.task_id = task_id
