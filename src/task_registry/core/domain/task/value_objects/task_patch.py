from dataclasses import dataclass, fields

from task_registry.core.domain.task.value_objects.task_priority import TaskPriority


@dataclass(frozen=True)
class TaskPatch:
    """
    Validated partial update.
    A field left as None was absent from the request and must not change.
    """
    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    priority: TaskPriority | None = None

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
