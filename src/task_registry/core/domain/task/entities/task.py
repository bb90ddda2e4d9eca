from dataclasses import dataclass, replace
from datetime import datetime

from task_registry.core.domain.task.value_objects.task_draft import TaskDraft
from task_registry.core.domain.task.value_objects.task_patch import TaskPatch
from task_registry.core.domain.task.value_objects.task_priority import TaskPriority


@dataclass
class Task:
    id: int
    title: str
    description: str
    completed: bool
    priority: TaskPriority
    created_at: datetime

    @classmethod
    def from_draft(cls, task_id: int, draft: TaskDraft, created_at: datetime) -> "Task":
        return cls(
            id=task_id,
            title=draft.title,
            description=draft.description,
            completed=draft.completed,
            priority=draft.priority,
            created_at=created_at,
        )

    def apply(self, patch: TaskPatch) -> None:
        """
        Mutates the task in place with the fields present in the patch.
        id and created_at are never touched.
        """
        if patch.title is not None:
            self.title = patch.title
        if patch.description is not None:
            self.description = patch.description
        if patch.completed is not None:
            self.completed = patch.completed
        if patch.priority is not None:
            self.priority = patch.priority

    def snapshot(self) -> "Task":
        return replace(self)
