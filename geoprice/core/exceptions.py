"""
Domain exceptions and the FastAPI handlers that render every failure
in the `{success, error, message}` envelope.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class GeoPriceError(Exception):
    """Base class for service-level errors."""


class GeocodingNotConfiguredError(GeoPriceError):
    """Raised when an operation needs the geocoding provider but no API key is set."""

    def __init__(self, message: str = "Google Maps API key required for real coordinate generation"):
        super().__init__(message)


def error_body(error: str, message: str | None = None) -> dict:
    body = {"success": False, "error": error}
    if message:
        body["message"] = message
    return body


async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        # Starlette's default for unmatched routes
        return JSONResponse(status_code=404, content=error_body("Route not found"))
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Malformed or incomplete input is a client error (400), not 422.
    Only field locations are echoed back, never the offending values.
    """
    fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) or "body" for err in exc.errors()})
    return JSONResponse(
        status_code=400,
        content=error_body("Invalid or missing fields", ", ".join(fields)),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """
    Logs the full error server-side; the client only sees a generic message.
    """
    logger.exception(f"Unexpected error handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=error_body("Internal server error"))
