from __future__ import annotations

from todolist_service.core.exceptions.infra_error import InfraError


class UserSeedingError(InfraError):
    """Raised when seed users cannot be written to the store."""
