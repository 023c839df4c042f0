"""
Error taxonomy for WorkerApp and the FastAPI handlers that render it.

- ValidationError: caller data fails a precondition, raised before any I/O
- NotFoundError: an entity the operation requires does not exist
- StorageError: the database operation failed, original cause preserved
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class WorkerAppError(Exception):
    """Base exception for all WorkerApp errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "internal_error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationError(WorkerAppError):
    def __init__(self, message: str, field: Optional[str] = None):
        details = None
        if field:
            details = [{"loc": ["body", field], "msg": message, "type": "value_error"}]
        super().__init__(
            message=message,
            error_code="validation_error",
            status_code=422,
            details=details,
        )
        self.field = field


class NotFoundError(WorkerAppError):
    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            message=f"{resource} with ID {resource_id} not found",
            error_code="not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.resource = resource
        self.resource_id = resource_id


class StorageError(WorkerAppError):
    """Database operation failed. The driver/ORM error is kept as `cause`."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(
            message=message,
            error_code="storage_error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        self.cause = cause


async def workerapp_exception_handler(request: Request, exc: WorkerAppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WorkerAppError, workerapp_exception_handler)
