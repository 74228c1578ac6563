"""
Barrique FastAPI Application
Serves the BucksBuddy (journeys, expenses) and RecipeVault (recipes) APIs.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import health, users, journeys, expenses, recipes, recipe_components
import domain.models as db_models
from app.config import settings
from api import middleware
from app.exceptions import (
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("barrique.main")

EXCEPTION_HANDLERS = {
    RequestValidationError: middleware.validation_exception_handler,
    StarletteHTTPException: middleware.http_exception_handler,
    ServiceValidationError: middleware.service_validation_exception_handler,
    UnauthorizedError: middleware.unauthorized_exception_handler,
    ForbiddenError: middleware.forbidden_exception_handler,
    NotFoundError: middleware.not_found_exception_handler,
    ConflictError: middleware.conflict_exception_handler,
    Exception: middleware.general_exception_handler,
}


async def create_schema_with_retries() -> None:
    """Create tables, waiting for the database to accept connections"""
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            # create_all blocks; keep it off the event loop
            await anyio.to_thread.run_sync(db_models.init_database)
            return
        except Exception as exc:
            if attempt == attempts:
                _logger.error("Database initialization failed after %d attempts", attempt)
                raise
            _logger.warning(
                "Database init attempt %d/%d failed: %s; retrying in %.1fs",
                attempt,
                attempts,
                exc,
                settings.db_init_delay_sec,
            )
            await anyio.sleep(settings.db_init_delay_sec)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info("Starting %s in %s mode", settings.app_name, settings.environment.value)
    await create_schema_with_retries()
    try:
        yield
    finally:
        _logger.info("Shutting down %s", settings.app_name)
        db_models.engine.dispose()


docs_enabled = not settings.is_production()

app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
    docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
    redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
app.add_middleware(middleware.RequestLoggingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

for router in (health.router, users.router, journeys.router, expenses.router, recipes.router):
    app.include_router(router, prefix=settings.api_prefix)
for router in recipe_components.routers:
    app.include_router(router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
