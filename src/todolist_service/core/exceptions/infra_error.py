from todolist_service.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """A failure in an external collaborator such as the relational store."""
