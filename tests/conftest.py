from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from task_registry.core.application.services import TaskRegistryService
from task_registry.core.domain.task import TaskDraft, TaskPriority
from task_registry.infrastructure.configuration.main_settings import Settings
from task_registry.infrastructure.entrypoints.api.app_factory import create_app
from task_registry.infrastructure.repositories import InMemoryTaskRepository


class SteppingClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        app_name="TestTaskRegistry",
        env="test",
        log_level="WARNING",
        seed_sample_task=True,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client(settings):
    app = create_app(settings.model_copy(update={"seed_sample_task": False}))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_task_payload():
    return {
        "title": "Write docs",
        "description": "Document the public endpoints",
        "completed": False,
        "priority": "high",
    }


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def clock():
    return SteppingClock()


@pytest.fixture
def service(repository, clock):
    return TaskRegistryService(repository, clock=clock)


@pytest.fixture
def make_draft():
    def _make(title="Task", description="Something to do", completed=False, priority=TaskPriority.MEDIUM):
        return TaskDraft(title=title, description=description, completed=completed, priority=priority)

    return _make
