from collections.abc import Sequence
from pathlib import Path

import pytest

from todolist_service.core.application.ports.user_repository import UserRepository
from todolist_service.core.domain.task import TaskCatalog
from todolist_service.core.domain.user import User
from todolist_service.core.exceptions import UserSeedingError
from todolist_service.infrastructure.configuration.main_settings import Settings


class InMemoryUserRepository(UserRepository):
    """
    Dict-backed UserRepository for unit tests.
    Rejects duplicate ids the way a primary key would, without partial writes.
    """

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.add_calls = 0

    def add_all(self, users: Sequence[User]) -> None:
        self.add_calls += 1
        ids = [user.id for user in users]
        duplicates = sorted({i for i in ids if i in self.rows or ids.count(i) > 1})
        if duplicates:
            raise UserSeedingError(f"Duplicate user ids: {duplicates}")
        for user in users:
            self.rows[user.id] = user

    def list_all(self) -> list[User]:
        return [self.rows[key] for key in sorted(self.rows)]


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'users.db'}"


@pytest.fixture
def settings(sqlite_url: str) -> Settings:
    return Settings(_env_file=None, app_name="TestTodolist", database_url=sqlite_url)


@pytest.fixture
def custom_catalog() -> TaskCatalog:
    return TaskCatalog.from_descriptions(["Write tests", "Ship it"])
