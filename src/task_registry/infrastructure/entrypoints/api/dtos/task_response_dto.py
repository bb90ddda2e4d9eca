from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from task_registry.core.domain.task import Task, TaskPriority


def to_iso_timestamp(moment: datetime) -> str:
    """UTC, millisecond precision, Z suffix: 2026-10-17T09:30:00.123Z"""
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskResponseDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    completed: bool
    priority: TaskPriority
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            created_at=to_iso_timestamp(task.created_at),
        )
