from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from task_registry.core.application.ports.task_repository import TaskRepository
from task_registry.core.application.validation import (
    validate_new_task,
    validate_priority_level,
    validate_task_patch,
)
from task_registry.core.domain.exceptions import TaskNotFoundError
from task_registry.core.domain.task import Task
from task_registry.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)

SORT_BY_DATE = "date"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskRegistryService:
    """Application service behind the /tasks endpoints."""

    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def list_tasks(self, completed: str | None = None, sort: str | None = None) -> list[Task]:
        """
        `completed` is compared case-insensitively to "true"; any other value
        selects the open tasks. Only `sort="date"` is recognised.
        """
        tasks = self._repository.list_all()

        if completed is not None:
            wanted = completed.lower() == "true"
            tasks = [task for task in tasks if task.completed is wanted]

        if sort == SORT_BY_DATE:
            tasks.sort(key=lambda task: task.created_at)

        return tasks

    def get_task(self, task_id: int | None) -> Task:
        task = self._repository.find_by_id(task_id) if task_id is not None else None
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks_by_priority(self, level: str) -> list[Task]:
        priority = validate_priority_level(level).unwrap()
        return [task for task in self._repository.list_all() if task.priority == priority]

    def create_task(self, payload: Mapping[str, Any]) -> Task:
        draft = validate_new_task(payload).unwrap()
        task = self._repository.add(draft, created_at=self._clock())
        logger.info(f"Task {task.id} created with priority '{task.priority}'")
        return task

    def update_task(self, task_id: int | None, payload: Mapping[str, Any]) -> Task:
        # validated eagerly, raised lazily: an unknown id wins over a bad payload
        result = validate_task_patch(payload)

        def _apply(task: Task) -> None:
            task.apply(result.unwrap())

        updated = self._repository.update(task_id, _apply) if task_id is not None else None
        if updated is None:
            raise TaskNotFoundError(task_id)

        logger.info(f"Task {task_id} updated: {result.value.changed_fields()}")
        return updated

    def delete_task(self, task_id: int | None) -> Task:
        removed = self._repository.remove(task_id) if task_id is not None else None
        if removed is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Task {task_id} deleted")
        return removed
