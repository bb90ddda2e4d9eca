from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_registry.core.domain.exceptions import (
    TaskNotFoundError,
    TaskValidationError,
)
from task_registry.infrastructure.observability.logger_factory_service import get_logger

ROUTE_NOT_FOUND_MESSAGE = "Route not found"


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_error_handlers(app: FastAPI) -> None:
    """Maps domain and routing errors onto {"message": ...} responses."""
    logger = get_logger("api.error_handlers")

    @app.exception_handler(TaskValidationError)
    async def task_validation_handler(request: Request, exc: TaskValidationError):
        logger.warning("Rejected request", error_type="validation", error_details=exc.message)
        return _message_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
        logger.warning("Task lookup failed", error_type="not_found", error_details=exc.task_id)
        return _message_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # unknown path and known path with an unsupported method look the same to clients
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            logger.warning("Route not found", error_type="route_not_found", error_code=exc.status_code)
            return _message_response(status.HTTP_404_NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE)
        return _message_response(exc.status_code, str(exc.detail))

