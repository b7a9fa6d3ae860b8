from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, NonNegativeInt, TypeAdapter

from todolist_service.core.domain.user import User


class UserDTO(BaseModel):
    """Wire shape of a user. Field order defines JSON key order."""

    model_config = ConfigDict(frozen=True)

    id: NonNegativeInt
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id, name=user.name, email=user.email)

    def to_entity(self) -> User:
        return User(id=self.id, name=self.name, email=self.email)


_USER_LIST_ADAPTER = TypeAdapter(list[UserDTO])


def serialize_users(users: Iterable[User]) -> str:
    """Compact JSON array, e.g. [{"id":1,"name":"...","email":"..."}]."""
    payload = [UserDTO.from_entity(user) for user in users]
    return _USER_LIST_ADAPTER.dump_json(payload).decode("utf-8")


def deserialize_users(raw: str | bytes) -> list[User]:
    return [dto.to_entity() for dto in _USER_LIST_ADAPTER.validate_json(raw)]
