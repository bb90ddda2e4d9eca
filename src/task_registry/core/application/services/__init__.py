from task_registry.core.application.services.task_registry_service import TaskRegistryService

__all__ = ["TaskRegistryService"]
