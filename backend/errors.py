"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GardenError(Exception):
    """Base exception with HTTP status code and optional extra body fields."""

    def __init__(self, message: str, status_code: int = 500, extra: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.extra = extra or {}


class MissingParameterError(GardenError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class NotFoundError(GardenError):
    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message, status_code=404, extra=extra)


class UpstreamError(GardenError):
    """Third-party service answered with a failure status or an unusable body."""

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message, status_code=502, extra=extra)


class NetworkError(GardenError):
    """Third-party service could not be reached."""

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message, status_code=503, extra=extra)


class UpstreamTimeoutError(GardenError):
    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message, status_code=504, extra=extra)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(GardenError)
    async def handle_garden_error(_request: Request, exc: GardenError):
        if exc.status_code >= 500:
            logger.warning("Request failed (%d): %s", exc.status_code, exc)
        return JSONResponse({"error": str(exc), **exc.extra}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_request: Request, exc: RequestValidationError):
        return JSONResponse({"error": "Invalid request", "details": jsonable_encoder(exc.errors())}, status_code=400)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
