from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Todolist Service"
    log_level: str = "INFO"

    # HTTP server
    server_host: str = Field(default="0.0.0.0", description="Interface the API binds to")
    server_port: int = Field(default=8080, ge=1, le=65535)
    server_workers: int = Field(default=1, ge=1, description="uvicorn worker processes")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
