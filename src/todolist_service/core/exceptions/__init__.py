from todolist_service.core.exceptions.database_connection_error import DatabaseConnectionError
from todolist_service.core.exceptions.domain_error import DomainError
from todolist_service.core.exceptions.infra_error import InfraError
from todolist_service.core.exceptions.user_seeding_error import UserSeedingError

__all__ = [
    "DatabaseConnectionError",
    "DomainError",
    "InfraError",
    "UserSeedingError",
]
