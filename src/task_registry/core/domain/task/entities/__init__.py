from task_registry.core.domain.task.entities.task import Task

__all__ = ["Task"]
