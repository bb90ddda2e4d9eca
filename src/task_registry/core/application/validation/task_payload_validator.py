"""Validation rules for task payloads.

Rules run in a fixed order (title, description, completed, priority) and the
first failing rule decides the message returned to the client.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from task_registry.core.application.validation.validation_result import ValidationResult
from task_registry.core.domain.task import (
    DEFAULT_TASK_PRIORITY,
    TaskDraft,
    TaskPatch,
    TaskPriority,
)

TITLE_REQUIRED = "Title is required and cannot be empty"
DESCRIPTION_REQUIRED = "Description is required and cannot be empty"
COMPLETED_MUST_BE_BOOLEAN = "Completed status must be a boolean (true or false)"
PRIORITY_INVALID = f"Priority must be one of: {TaskPriority.allowed_values()}"
PRIORITY_LEVEL_INVALID = f"Invalid priority level. Must be: {TaskPriority.allowed_values()}"

TITLE_EMPTY = "Title cannot be empty"
DESCRIPTION_EMPTY = "Description cannot be empty"
COMPLETED_NOT_BOOLEAN = "Completed status must be a boolean"


def _is_filled_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_new_task(payload: Mapping[str, Any]) -> ValidationResult[TaskDraft]:
    title = payload.get("title")
    if not _is_filled_text(title):
        return ValidationResult.failure(TITLE_REQUIRED)

    description = payload.get("description")
    if not _is_filled_text(description):
        return ValidationResult.failure(DESCRIPTION_REQUIRED)

    completed = payload.get("completed")
    # bool is checked by type so 1 / "true" are rejected
    if not isinstance(completed, bool):
        return ValidationResult.failure(COMPLETED_MUST_BE_BOOLEAN)

    raw_priority = payload.get("priority")
    if raw_priority is None:
        priority = DEFAULT_TASK_PRIORITY
    else:
        priority = TaskPriority.parse(raw_priority)
        if priority is None:
            return ValidationResult.failure(PRIORITY_INVALID)

    return ValidationResult.success(
        TaskDraft(
            title=title,
            description=description,
            completed=completed,
            priority=priority,
        )
    )


def validate_task_patch(payload: Mapping[str, Any]) -> ValidationResult[TaskPatch]:
    """
    Only keys present in the payload are checked. A key present with a null
    value counts as present and fails its rule.
    """
    changes: dict[str, Any] = {}

    if "title" in payload:
        if not _is_filled_text(payload["title"]):
            return ValidationResult.failure(TITLE_EMPTY)
        changes["title"] = payload["title"]

    if "description" in payload:
        if not _is_filled_text(payload["description"]):
            return ValidationResult.failure(DESCRIPTION_EMPTY)
        changes["description"] = payload["description"]

    if "completed" in payload:
        if not isinstance(payload["completed"], bool):
            return ValidationResult.failure(COMPLETED_NOT_BOOLEAN)
        changes["completed"] = payload["completed"]

    if "priority" in payload:
        priority = TaskPriority.parse(payload["priority"])
        if priority is None:
            return ValidationResult.failure(PRIORITY_INVALID)
        changes["priority"] = priority

    return ValidationResult.success(TaskPatch(**changes))


def validate_priority_level(raw_level: str) -> ValidationResult[TaskPriority]:
    priority = TaskPriority.parse(raw_level)
    if priority is None:
        return ValidationResult.failure(PRIORITY_LEVEL_INVALID)
    return ValidationResult.success(priority)
