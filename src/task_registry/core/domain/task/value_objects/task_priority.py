from enum import StrEnum


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: object) -> "TaskPriority | None":
        """Case-insensitive lookup. Returns None for anything outside the enum."""
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.lower())
        except ValueError:
            return None

    @classmethod
    def allowed_values(cls) -> str:
        return ", ".join(member.value for member in cls)


DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM
