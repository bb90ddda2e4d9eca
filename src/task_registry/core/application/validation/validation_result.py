from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from task_registry.core.domain.exceptions import TaskValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a validated value or the message of the first rule that failed."""
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> ValidationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> ValidationResult[T]:
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise TaskValidationError(self.error)
        return self.value  # type: ignore[return-value]
