from collections.abc import Callable

from todolist_service.core.application.services.user_service import UserService
from todolist_service.core.application.usecases.seed_users_report_usecase import (
    SeedUsersReportUseCase,
)
from todolist_service.core.exceptions import DatabaseConnectionError, DomainError
from todolist_service.infrastructure.configuration.main_settings import Settings
from todolist_service.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from todolist_service.infrastructure.persistence.database import Database
from todolist_service.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

logger = get_logger("seed_users_command")

EXIT_OK = 0
EXIT_FAILURE = 1


def run_seed_users(settings: Settings, echo: Callable[[str], None] = print) -> int:
    """
    One-shot job: connect, migrate, seed, report.
    Returns the process exit code.
    """
    configure_logging(settings.log_level)

    try:
        database = Database.connect(settings)
    except DatabaseConnectionError as exc:
        _log_failure("Failed to connect to database", exc)
        return EXIT_FAILURE

    with database:
        try:
            database.create_schema()
            repository = SqlAlchemyUserRepository(database.session_factory)
            usecase = SeedUsersReportUseCase(UserService(repository), echo=echo)
            users = usecase.execute()
        except DomainError as exc:
            _log_failure("User seeding failed", exc)
            return EXIT_FAILURE

    logger.info("User seeding finished", processing_status="SUCCESS", user_count=len(users))
    return EXIT_OK


def _log_failure(message: str, exc: Exception) -> None:
    logger.error(
        message,
        processing_status="ERROR",
        error_type=type(exc).__name__,
        error_details=str(exc),
        error_retryable=False,
    )
