from collections.abc import Sequence

import structlog

from todolist_service.core.application.ports.user_repository import UserRepository
from todolist_service.core.domain.user import DUMMY_USERS, User

logger = structlog.get_logger()


class UserService:
    """Seeds and reads users through an injected repository."""

    def __init__(self, repository: UserRepository, seed_users: Sequence[User] = DUMMY_USERS):
        self._repository = repository
        self._seed_users = tuple(seed_users)

    def create_dummy_users(self) -> list[User]:
        # No existence check: re-seeding the same ids conflicts on the primary key.
        users = list(self._seed_users)
        self._repository.add_all(users)
        logger.info("Seed users inserted", user_ids=[user.id for user in users])
        return users

    def get_all_users(self) -> list[User]:
        users = self._repository.list_all()
        logger.info("Users fetched", user_count=len(users))
        return users
