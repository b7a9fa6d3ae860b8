from fastapi import APIRouter, Depends, Request

from todolist_service.core.domain.task import TaskCatalog
from todolist_service.infrastructure.entrypoints.api.dtos.todo_response_dto import (
    GreetingResponseDTO,
    TaskListResponseDTO,
)

WELCOME_MESSAGE = "Hello user. Welcome to our Todolist App!"

router = APIRouter()


def get_task_catalog(request: Request) -> TaskCatalog:
    return request.app.state.task_catalog


@router.get("/", response_model=GreetingResponseDTO)
def hello_user() -> GreetingResponseDTO:
    return GreetingResponseDTO(message=WELCOME_MESSAGE)


@router.get("/show-tasks", response_model=TaskListResponseDTO)
def show_tasks(catalog: TaskCatalog = Depends(get_task_catalog)) -> TaskListResponseDTO:
    return TaskListResponseDTO(task=catalog.descriptions())
