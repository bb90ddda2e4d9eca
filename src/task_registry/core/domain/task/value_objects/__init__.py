from task_registry.core.domain.task.value_objects.task_draft import TaskDraft
from task_registry.core.domain.task.value_objects.task_patch import TaskPatch
from task_registry.core.domain.task.value_objects.task_priority import (
    DEFAULT_TASK_PRIORITY,
    TaskPriority,
)

__all__ = [
    "DEFAULT_TASK_PRIORITY",
    "TaskDraft",
    "TaskPatch",
    "TaskPriority",
]
