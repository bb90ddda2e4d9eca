from dataclasses import dataclass

from task_registry.core.domain.task.value_objects.task_priority import (
    DEFAULT_TASK_PRIORITY,
    TaskPriority,
)


@dataclass(frozen=True)
class TaskDraft:
    """Validated creation payload. Has no id or timestamp yet."""
    title: str
    description: str
    completed: bool
    priority: TaskPriority = DEFAULT_TASK_PRIORITY
