from __future__ import annotations

from task_registry.core.domain.exceptions.task_registry_error import TaskRegistryError


class TaskValidationError(TaskRegistryError):
    """Raised when a client payload or path parameter is rejected."""
