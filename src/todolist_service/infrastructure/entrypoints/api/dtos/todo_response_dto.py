from pydantic import BaseModel


class GreetingResponseDTO(BaseModel):
    message: str


class TaskListResponseDTO(BaseModel):
    task: list[str]
