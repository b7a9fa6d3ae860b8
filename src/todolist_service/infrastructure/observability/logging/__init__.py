from todolist_service.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from todolist_service.infrastructure.observability.logging.schema_processor import (
    structured_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "structured_schema_processor",
]
