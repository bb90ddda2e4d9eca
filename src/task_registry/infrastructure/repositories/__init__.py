from task_registry.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)
from task_registry.infrastructure.repositories.sample_tasks import build_sample_tasks

__all__ = [
    "InMemoryTaskRepository",
    "build_sample_tasks",
]
