from task_registry.core.domain.task.entities import Task
from task_registry.core.domain.task.value_objects import (
    DEFAULT_TASK_PRIORITY,
    TaskDraft,
    TaskPatch,
    TaskPriority,
)

__all__ = [
    "DEFAULT_TASK_PRIORITY",
    "Task",
    "TaskDraft",
    "TaskPatch",
    "TaskPriority",
]
