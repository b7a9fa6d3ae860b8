from pydantic_settings import SettingsConfigDict

from todolist_service.infrastructure.configuration.app_settings import AppSettings
from todolist_service.infrastructure.configuration.database_settings import DatabaseSettings


class Settings(AppSettings, DatabaseSettings):
    """
    Master configuration class that aggregates all setting modules.
    Usage:
        settings = Settings()
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
