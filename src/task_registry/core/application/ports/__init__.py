from task_registry.core.application.ports.task_repository import TaskRepository

__all__ = ["TaskRepository"]
