class DomainError(Exception):
    """Root of the todolist error hierarchy; entry points catch this to exit cleanly."""
