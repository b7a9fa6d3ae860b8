from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todolist_service.core.domain.task import TaskCatalog, default_task_catalog
from todolist_service.infrastructure.configuration.main_settings import Settings
from todolist_service.infrastructure.entrypoints.api.todo_router import router as todo_router
from todolist_service.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from todolist_service.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)

logger = get_logger("app_factory")


def create_app(settings: Settings, task_catalog: TaskCatalog | None = None) -> FastAPI:
    configure_logging(settings.log_level)
    catalog = task_catalog if task_catalog is not None else default_task_catalog()

    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        server_host=settings.server_host,
        server_port=settings.server_port,
        task_count=len(catalog),
    )

    # Only the todo routes are exposed; no docs or schema endpoints.
    app = FastAPI(title=settings.app_name, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.task_catalog = catalog
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def unrouted_request_handler(request: Request, exc: StarletteHTTPException):
        # A known path with an unsupported method is answered like an unknown path.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            exc = StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await http_exception_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(
            "Request validation failed",
            error_type=type(exc).__name__,
            error_details=str(exc.errors()),
            context_endpoint=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder({"detail": exc.errors()}),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error while serving request",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=False,
            context_endpoint=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": "Internal processing error."},
        )

    app.include_router(todo_router)

    return app
