from abc import ABC, abstractmethod
from collections.abc import Sequence

from todolist_service.core.domain.user import User


class UserRepository(ABC):
    @abstractmethod
    def add_all(self, users: Sequence[User]) -> None:
        """Persists all users in a single batch. Raises UserSeedingError on failure."""
        pass

    @abstractmethod
    def list_all(self) -> list[User]:
        """Returns every stored user."""
        pass
