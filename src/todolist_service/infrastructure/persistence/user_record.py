from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from todolist_service.core.domain.user import User


class Base(DeclarativeBase):
    pass


class UserRecord(Base):
    __tablename__ = "users"
    __table_args__ = (CheckConstraint("id >= 0", name="ck_users_id_unsigned"),)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)

    @classmethod
    def from_entity(cls, user: User) -> "UserRecord":
        return cls(id=user.id, name=user.name, email=user.email)

    def to_entity(self) -> User:
        return User(id=self.id, name=self.name, email=self.email)
