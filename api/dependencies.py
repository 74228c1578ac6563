"""
API dependencies for dependency injection
"""

import logging
from typing import Generator, Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from domain.models import AppUser, get_db_session
from repositories import UserRepository
from app.config import settings
from app.exceptions import UnauthorizedError

logger = logging.getLogger("barrique.api.auth")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    db: Session = Depends(get_db),
    x_auth_request_user: Optional[str] = Header(default=None, alias=settings.auth_user_header),
) -> AppUser:
    """
    Resolve the authenticated user for the request.

    Authentication happens upstream; the authenticating proxy forwards the
    username in the ``X-Auth-Request-User`` header and the user is looked up
    by that name. The header name is configurable via ``AUTH_USER_HEADER``.

    Raises:
        UnauthorizedError: If the header is missing or names no known user
    """
    username = (x_auth_request_user or "").strip()
    if not username:
        raise UnauthorizedError("Authentication required")
    user = UserRepository(db).get_by_username(username)
    if user is None:
        logger.warning("Unknown authenticated user %r", username)
        raise UnauthorizedError("Authentication required")
    return user
