import sys

import uvicorn

from todolist_service.infrastructure.configuration.main_settings import Settings
from todolist_service.infrastructure.entrypoints.api.app_factory import create_app
from todolist_service.infrastructure.entrypoints.cli.seed_users_command import run_seed_users


def serve():
    """Run the todolist HTTP server."""
    settings = Settings()
    uvicorn.run(
        "todolist_service.main:app",
        host=settings.server_host,
        port=settings.server_port,
        workers=settings.server_workers,
        log_level=settings.log_level.lower(),
    )


def seed_users():
    """Seed the users table and print the report."""
    sys.exit(run_seed_users(Settings()))


# Instantiate global app for ASGI
settings = Settings()
app = create_app(settings)
