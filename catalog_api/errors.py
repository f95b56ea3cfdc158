"""Error types and the HTTP boundary that translates them.

Storage failures surface as StorageError and are answered with 500 and the
raw driver message. Anything else that escapes a handler gets the same
500 body. NotFoundError is only raised in strict mode.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Any failure reported by the storage layer."""

    def __init__(self, message: str, operation: str = "query"):
        super().__init__(message)
        self.message = message
        self.operation = operation


class NotFoundError(Exception):
    """No record matched the requested key."""

    def __init__(self, label: str, key: int):
        super().__init__(f"{label} not found")
        self.message = f"{label} not found"
        self.label = label
        self.key = key


def register_error_handlers(app: FastAPI) -> None:
    """Register the StorageError, NotFoundError and catch-all handlers on the app."""

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(
            f"Storage {exc.operation} failed on {request.url.path}: {exc.message}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info(f"{exc.label} {exc.key} not found on {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": exc.message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}", exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )
