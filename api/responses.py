"""
Error envelope and health payloads shared by all routers.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code, e.g. NOT_FOUND")
    message: str = Field(..., description="Human-readable message")
    details: Optional[Any] = Field(None, description="Ids or field errors involved")


class ErrorResponse(BaseModel):
    """Body of every non-2xx response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok', or 'degraded' when the database is unreachable")
    service: str
    version: Optional[str] = None
    database: str = Field(..., description="'connected' or 'disconnected'")
    timestamp: datetime = Field(default_factory=_utcnow)


# Documented on routers whose resources hang off a user-owned parent
OWNER_SCOPED_RESPONSES = {
    401: {"model": ErrorResponse, "description": "No authenticated user"},
    403: {"model": ErrorResponse, "description": "Parent not owned by the current user"},
    404: {"model": ErrorResponse, "description": "Resource absent or under another parent"},
}


def error_response(code: str, message: str, details: Any = None) -> dict:
    """Build the JSON-ready error envelope; ``details`` is omitted when None"""
    error: dict = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": _utcnow().isoformat(),
    }
