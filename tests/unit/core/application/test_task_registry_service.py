from datetime import datetime, timezone

import pytest

from task_registry.core.domain.exceptions import TaskNotFoundError, TaskValidationError
from task_registry.core.domain.task import TaskPriority


def payload(title="Task", completed=False, priority=None):
    data = {"title": title, "description": f"{title} description", "completed": completed}
    if priority is not None:
        data["priority"] = priority
    return data


def test_create_assigns_increasing_ids(service):
    first = service.create_task(payload("one"))
    second = service.create_task(payload("two"))

    assert first.id == 1
    assert second.id == 2


def test_create_stamps_clock_time(service, clock):
    expected = clock.current
    task = service.create_task(payload())
    assert task.created_at == expected


def test_create_invalid_payload_does_not_store(service, repository):
    with pytest.raises(TaskValidationError):
        service.create_task(payload(title=" "))
    assert len(repository) == 0


def test_list_filters_by_completed(service):
    service.create_task(payload("open"))
    service.create_task(payload("done", completed=True))

    assert [t.title for t in service.list_tasks(completed="true")] == ["done"]
    assert [t.title for t in service.list_tasks(completed="TRUE")] == ["done"]
    assert [t.title for t in service.list_tasks(completed="false")] == ["open"]
    assert [t.title for t in service.list_tasks(completed="yes")] == ["open"]


def test_list_sort_by_date(repository, make_draft, service):
    repository.add(make_draft(title="late"), created_at=datetime(2026, 5, 2, tzinfo=timezone.utc))
    repository.add(make_draft(title="early"), created_at=datetime(2026, 5, 1, tzinfo=timezone.utc))

    assert [t.title for t in service.list_tasks()] == ["late", "early"]
    assert [t.title for t in service.list_tasks(sort="date")] == ["early", "late"]
    assert [t.title for t in service.list_tasks(sort="title")] == ["late", "early"]


def test_get_task_not_found(service):
    with pytest.raises(TaskNotFoundError) as exc:
        service.get_task(99)
    assert exc.value.message == "Task not found"
    assert exc.value.task_id == 99


def test_get_task_unparseable_id(service):
    with pytest.raises(TaskNotFoundError):
        service.get_task(None)


def test_list_by_priority(service):
    service.create_task(payload("a", priority="high"))
    service.create_task(payload("b"))
    service.create_task(payload("c", priority="HIGH"))

    assert [t.title for t in service.list_tasks_by_priority("High")] == ["a", "c"]
    assert service.list_tasks_by_priority("low") == []


def test_list_by_priority_invalid(service):
    with pytest.raises(TaskValidationError) as exc:
        service.list_tasks_by_priority("urgent")
    assert "Invalid priority level" in exc.value.message


def test_update_applies_only_supplied_fields(service):
    created = service.create_task(payload("keep", priority="low"))
    updated = service.update_task(created.id, {"completed": True})

    assert updated.completed is True
    assert updated.title == created.title
    assert updated.description == created.description
    assert updated.priority is TaskPriority.LOW
    assert updated.created_at == created.created_at


def test_update_unknown_id_wins_over_invalid_payload(service):
    with pytest.raises(TaskNotFoundError):
        service.update_task(42, {"title": ""})


def test_update_invalid_payload_leaves_task_untouched(service):
    created = service.create_task(payload("stable"))
    with pytest.raises(TaskValidationError):
        service.update_task(created.id, {"title": "changed", "completed": "yes"})

    assert service.get_task(created.id).title == "stable"


def test_delete_returns_removed_task(service):
    created = service.create_task(payload())
    removed = service.delete_task(created.id)

    assert removed == created
    with pytest.raises(TaskNotFoundError):
        service.get_task(created.id)
    with pytest.raises(TaskNotFoundError):
        service.delete_task(created.id)


def test_ids_are_not_reused_after_delete(service):
    first = service.create_task(payload())
    service.delete_task(first.id)
    second = service.create_task(payload())
    assert second.id > first.id
