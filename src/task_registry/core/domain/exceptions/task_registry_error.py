from __future__ import annotations


class TaskRegistryError(Exception):
    """Base error for the task registry."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
