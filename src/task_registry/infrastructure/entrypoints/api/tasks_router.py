from typing import Any

from fastapi import APIRouter, Depends, Request, status

from task_registry.core.application.services import TaskRegistryService
from task_registry.infrastructure.entrypoints.api.dtos import TaskResponseDTO
from task_registry.infrastructure.entrypoints.api.parsers import (
    parse_task_id,
    read_json_object,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_service(request: Request) -> TaskRegistryService:
    return request.app.state.task_service


@router.get("", response_model=list[TaskResponseDTO])
def list_tasks(
    completed: str | None = None,
    sort: str | None = None,
    service: TaskRegistryService = Depends(get_task_service),
):
    tasks = service.list_tasks(completed=completed, sort=sort)
    return [TaskResponseDTO.from_entity(task) for task in tasks]


@router.get("/priority/{level}", response_model=list[TaskResponseDTO])
def list_tasks_by_priority(
    level: str,
    service: TaskRegistryService = Depends(get_task_service),
):
    tasks = service.list_tasks_by_priority(level)
    return [TaskResponseDTO.from_entity(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskResponseDTO)
def get_task(
    task_id: str,
    service: TaskRegistryService = Depends(get_task_service),
):
    return TaskResponseDTO.from_entity(service.get_task(parse_task_id(task_id)))


@router.post("", response_model=TaskResponseDTO, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: dict[str, Any] = Depends(read_json_object),
    service: TaskRegistryService = Depends(get_task_service),
):
    return TaskResponseDTO.from_entity(service.create_task(payload))


@router.put("/{task_id}", response_model=TaskResponseDTO)
def update_task(
    task_id: str,
    payload: dict[str, Any] = Depends(read_json_object),
    service: TaskRegistryService = Depends(get_task_service),
):
    return TaskResponseDTO.from_entity(service.update_task(parse_task_id(task_id), payload))


@router.delete("/{task_id}", response_model=TaskResponseDTO)
def delete_task(
    task_id: str,
    service: TaskRegistryService = Depends(get_task_service),
):
    return TaskResponseDTO.from_entity(service.delete_task(parse_task_id(task_id)))
