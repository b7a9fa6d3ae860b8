from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

POSTGRES_DRIVER = "postgresql+psycopg"


class DatabaseSettings(BaseSettings):
    """
    Connection parameters for the relational store.
    `database_url` overrides the discrete fields when set (e.g. sqlite:///users.db).
    """

    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: SecretStr = SecretStr("yourpassword")
    db_name: str = "testdb"
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_sslmode: str = "disable"
    db_timezone: str = "Asia/Jakarta"
    db_echo: bool = False

    database_url: str | None = Field(default=None, description="Full SQLAlchemy URL override")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def sqlalchemy_url(self) -> URL:
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            POSTGRES_DRIVER,
            username=self.db_user,
            password=self.db_password.get_secret_value(),
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    def connect_args(self) -> dict[str, Any]:
        """libpq options for PostgreSQL; other backends take none."""
        if self.sqlalchemy_url().get_backend_name() != "postgresql":
            return {}
        return {
            "sslmode": self.db_sslmode,
            "options": f"-c timezone={self.db_timezone}",
        }
