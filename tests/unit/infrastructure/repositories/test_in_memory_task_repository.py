from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from task_registry.core.domain.task import TaskPatch
from task_registry.infrastructure.repositories import InMemoryTaskRepository, build_sample_tasks

NOW = datetime(2026, 2, 2, tzinfo=timezone.utc)


def test_seeded_repository_starts_counter_above_seed(make_draft):
    repository = InMemoryTaskRepository(seed=build_sample_tasks(NOW))

    assert [t.id for t in repository.list_all()] == [1]
    assert repository.add(make_draft(), NOW).id == 2


def test_sample_task_contents():
    (sample,) = build_sample_tasks(NOW)
    assert sample.title == "Set up environment"
    assert sample.completed is True
    assert sample.priority == "medium"
    assert sample.created_at == NOW


def test_returned_tasks_are_copies(repository, make_draft):
    task = repository.add(make_draft(title="original"), NOW)
    task.title = "mutated outside"

    listed = repository.list_all()
    listed[0].title = "mutated list"

    assert repository.find_by_id(task.id).title == "original"


def test_find_by_id_missing(repository):
    assert repository.find_by_id(1) is None


def test_update_missing_does_not_call_mutator(repository):
    calls = []
    assert repository.update(5, calls.append) is None
    assert calls == []


def test_update_failing_mutation_is_discarded(repository, make_draft):
    task = repository.add(make_draft(title="before"), NOW)

    def _mutate(candidate):
        candidate.title = "half written"
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        repository.update(task.id, _mutate)

    assert repository.find_by_id(task.id).title == "before"


def test_update_applies_patch(repository, make_draft):
    task = repository.add(make_draft(), NOW)
    updated = repository.update(task.id, lambda t: t.apply(TaskPatch(title="after")))

    assert updated.title == "after"
    assert repository.find_by_id(task.id).title == "after"


def test_remove(repository, make_draft):
    task = repository.add(make_draft(), NOW)

    assert repository.remove(task.id) == task
    assert repository.remove(task.id) is None
    assert len(repository) == 0


def test_concurrent_adds_get_unique_ids(repository, make_draft):
    with ThreadPoolExecutor(max_workers=8) as ex:
        tasks = list(ex.map(lambda i: repository.add(make_draft(title=f"t{i}"), NOW), range(200)))

    ids = [t.id for t in tasks]
    assert len(set(ids)) == 200
    assert sorted(ids) == list(range(1, 201))
    assert len(repository) == 200
