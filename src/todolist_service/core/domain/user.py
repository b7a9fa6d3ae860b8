from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Persisted user record.
    - id: caller-assigned unsigned primary key.
    """

    id: int
    name: str
    email: str

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"User id must be unsigned, got {self.id}")

    def display_line(self) -> str:
        return f"User: ID={self.id}, Name={self.name}, Email={self.email}"


DUMMY_USERS: tuple[User, ...] = (
    User(id=1, name="Alice Johnson", email="alice@example.com"),
    User(id=2, name="Bob Smith", email="bob@example.com"),
    User(id=3, name="Charlie Brown", email="charlie@example.com"),
)
