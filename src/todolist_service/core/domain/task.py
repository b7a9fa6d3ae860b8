from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_TASK_DESCRIPTIONS: tuple[str, ...] = (
    "Watch Go crash course",
    "Watch Nana's Golang Full Course",
    "Reward myself with a donut",
)


@dataclass(frozen=True)
class Task:
    description: str


@dataclass(frozen=True)
class TaskCatalog:
    """
    Ordered, read-only collection of tasks served by the API.
    Built once at startup and shared by every request handler.
    """

    tasks: tuple[Task, ...]

    @classmethod
    def from_descriptions(cls, descriptions: Iterable[str]) -> "TaskCatalog":
        return cls(tasks=tuple(Task(description=text) for text in descriptions))

    def descriptions(self) -> list[str]:
        """Returns task descriptions in catalog order."""
        return [task.description for task in self.tasks]

    def __len__(self) -> int:
        return len(self.tasks)


def default_task_catalog() -> TaskCatalog:
    return TaskCatalog.from_descriptions(DEFAULT_TASK_DESCRIPTIONS)
