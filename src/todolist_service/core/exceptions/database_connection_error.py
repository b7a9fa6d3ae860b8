from __future__ import annotations

from todolist_service.core.exceptions.infra_error import InfraError


class DatabaseConnectionError(InfraError):
    """Raised when the relational store cannot be reached."""
