from __future__ import annotations

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session, sessionmaker

from todolist_service.core.exceptions import DatabaseConnectionError
from todolist_service.infrastructure.configuration.database_settings import DatabaseSettings
from todolist_service.infrastructure.observability.logger_factory_service import get_logger
from todolist_service.infrastructure.persistence.user_record import Base

logger = get_logger("database")


class Database:
    """
    Owns the SQLAlchemy engine for one job run.
    Use as a context manager so the engine is disposed on every exit path.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory: sessionmaker[Session] = sessionmaker(engine, expire_on_commit=False)

    @classmethod
    def connect(cls, settings: DatabaseSettings) -> Database:
        """Builds the engine and verifies the store is reachable."""
        url = settings.sqlalchemy_url()
        engine = create_engine(url, echo=settings.db_echo, connect_args=settings.connect_args())
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except DBAPIError as exc:
            engine.dispose()
            raise DatabaseConnectionError(
                f"Failed to connect to database at {url.render_as_string(hide_password=True)}"
            ) from exc

        logger.info("Database connection established", backend=url.get_backend_name())
        return cls(engine)

    def create_schema(self) -> None:
        """Creates missing tables; existing tables are left untouched."""
        Base.metadata.create_all(self.engine)
        logger.info("Schema migrated", tables=sorted(Base.metadata.tables))

    def dispose(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
