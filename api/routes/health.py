"""Health check routes"""

from fastapi import APIRouter
from sqlalchemy import text
import logging

from api.responses import HealthResponse
from app.config import settings
import domain.models as db_models

router = APIRouter(tags=["Health"])
logger = logging.getLogger("barrique.api.health")


def _database_reachable() -> bool:
    try:
        with db_models.engine.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except Exception as exc:
        logger.error("Database health check failed: %s", exc)
        return False


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Service liveness plus a database round trip"""
    db_ok = _database_reachable()
    return HealthResponse(
        status="ok" if db_ok else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        database="connected" if db_ok else "disconnected",
    )
