"""
Request logging middleware and exception handlers for the Barrique API.

Handlers turn every failure into the envelope built by
``api.responses.error_response``.
"""

import time
import logging
from uuid import uuid4
from decimal import Decimal
from datetime import date

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.responses import error_response
from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

logger = logging.getLogger("barrique.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def to_jsonable(obj):
    """Make error details JSON-safe; amounts and dates render as in response bodies"""
    if isinstance(obj, (Decimal, Exception)):
        return str(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(item) for item in obj]
    return obj


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with its outcome and duration.

    An incoming ``X-Request-ID`` is reused so ids can be followed through the
    proxy; otherwise one is generated. The id and the processing time are
    echoed back as response headers.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        user = request.headers.get(settings.auth_user_header, "-")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed id=%s user=%s %s %s after %.4fs",
                request_id,
                user,
                request.method,
                request.url.path,
                time.perf_counter() - started,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "request id=%s user=%s %s %s -> %d in %.4fs",
            request_id,
            user,
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


def _service_error(request: Request, exc: ServiceError, code: str) -> JSONResponse:
    logger.warning("%s on %s: %s", code, request.url, exc)
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(
            exc.code or code, exc.message, to_jsonable(exc.details)
        ),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning("Validation error on %s: %s", request.url, exc.errors())

    return JSONResponse(
        status_code=422,
        content=error_response(
            "VALIDATION_ERROR",
            "Request validation failed",
            to_jsonable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url, exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle service validation errors"""
    return _service_error(request, exc, "SERVICE_VALIDATION_ERROR")


async def unauthorized_exception_handler(request: Request, exc: UnauthorizedError):
    """Handle requests without a resolvable user"""
    return _service_error(request, exc, "UNAUTHORIZED")


async def forbidden_exception_handler(request: Request, exc: ForbiddenError):
    """Handle ownership violations"""
    return _service_error(request, exc, "FORBIDDEN")


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    return _service_error(request, exc, "NOT_FOUND")


async def conflict_exception_handler(request: Request, exc: ConflictError):
    """Handle duplicate resources"""
    return _service_error(request, exc, "CONFLICT")


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception("Unexpected error on %s: %s", request.url, exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
