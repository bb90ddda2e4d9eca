from datetime import datetime

from task_registry.core.domain.task import Task, TaskPriority


def build_sample_tasks(created_at: datetime) -> list[Task]:
    """Records the registry starts with when seeding is enabled."""
    return [
        Task(
            id=1,
            title="Set up environment",
            description="Install Node.js, npm, and git",
            completed=True,
            priority=TaskPriority.MEDIUM,
            created_at=created_at,
        ),
    ]
