from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from datetime import datetime

from task_registry.core.application.ports.task_repository import TaskRepository
from task_registry.core.domain.task import Task, TaskDraft


class InMemoryTaskRepository(TaskRepository):
    """
    Process-local task collection.

    A single lock guards both the list and the id counter, so id assignment
    and every lookup-then-write sequence are atomic across worker threads.
    """

    def __init__(self, seed: Iterable[Task] = ()) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = [task.snapshot() for task in seed]
        self._next_id = max((task.id for task in self._tasks), default=0) + 1

    def list_all(self) -> list[Task]:
        with self._lock:
            return [task.snapshot() for task in self._tasks]

    def find_by_id(self, task_id: int) -> Task | None:
        with self._lock:
            index = self._index_of(task_id)
            return self._tasks[index].snapshot() if index is not None else None

    def add(self, draft: TaskDraft, created_at: datetime) -> Task:
        with self._lock:
            task = Task.from_draft(self._next_id, draft, created_at)
            self._next_id += 1
            self._tasks.append(task)
            return task.snapshot()

    def update(self, task_id: int, mutate: Callable[[Task], None]) -> Task | None:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            # work on a copy so a failing mutation never leaves a half-written record
            candidate = self._tasks[index].snapshot()
            mutate(candidate)
            self._tasks[index] = candidate
            return candidate.snapshot()

    def remove(self, task_id: int) -> Task | None:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            return self._tasks.pop(index)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
