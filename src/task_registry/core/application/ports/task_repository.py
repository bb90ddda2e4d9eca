from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime

from task_registry.core.domain.task import Task, TaskDraft


class TaskRepository(ABC):
    """
    Port for the task collection.
    Implementations hand out copies; callers never hold a live record.
    """

    @abstractmethod
    def list_all(self) -> list[Task]:
        """Returns every task in insertion order."""

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        """Finds a task by its id."""

    @abstractmethod
    def add(self, draft: TaskDraft, created_at: datetime) -> Task:
        """Assigns the next id to the draft and stores it."""

    @abstractmethod
    def update(self, task_id: int, mutate: Callable[[Task], None]) -> Task | None:
        """
        Runs `mutate` against the stored task as one atomic step.
        Returns None, without calling `mutate`, when the id is unknown.
        An exception raised by `mutate` leaves the task untouched.
        """

    @abstractmethod
    def remove(self, task_id: int) -> Task | None:
        """Removes a task and returns it as it was before removal."""
