from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from todolist_service.core.application.ports.user_repository import UserRepository
from todolist_service.core.domain.user import User
from todolist_service.core.exceptions import UserSeedingError
from todolist_service.infrastructure.persistence.user_record import UserRecord


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def add_all(self, users: Sequence[User]) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add_all([UserRecord.from_entity(user) for user in users])
        except SQLAlchemyError as exc:
            raise UserSeedingError(f"Failed to insert {len(users)} users: {exc}") from exc

    def list_all(self) -> list[User]:
        with self._session_factory() as session:
            records = session.scalars(select(UserRecord).order_by(UserRecord.id)).all()
            return [record.to_entity() for record in records]
