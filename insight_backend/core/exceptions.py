"""Application exceptions and their FastAPI handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class InsightException(Exception):
    """Base exception for the insight backend."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str = "E5000",
        details: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ContentConfigurationError(InsightException):
    """A summary row was produced that no registered configuration owns."""

    def __init__(self, uuid: str | None, content_type: str | None = None):
        super().__init__(
            f"No matching configuration found to convert content row with uuid {uuid}",
            code="E5001",
            details={"uuid": uuid, "content_type": content_type},
        )


class ContentRegistryError(InsightException):
    """Two configurations claim the same discriminant."""

    def __init__(self, message: str):
        super().__init__(message, code="E5002")


class InvalidSortColumnError(InsightException):
    """Sort column is not common to every content type."""

    def __init__(self, sort_by: str, allowed: tuple[str, ...]):
        super().__init__(
            f"Cannot sort content by '{sort_by}'; allowed columns: {', '.join(allowed)}",
            status_code=status.HTTP_400_BAD_REQUEST,
            code="E4001",
            details={"sort_by": sort_by, "allowed": list(allowed)},
        )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with FastAPI app."""

    @app.exception_handler(InsightException)
    async def insight_exception_handler(request: Request, exc: InsightException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc.message, extra={"extra": exc.details})
        else:
            logger.warning("%s: %s", type(exc).__name__, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.message,
                "error": {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details,
                },
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s: %s", type(exc).__name__, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "error": {"code": "E5000", "message": "Internal server error", "details": {}},
            },
        )
