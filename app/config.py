"""
Barrique settings, read from the environment or a ``.env`` file.

The database URL comes from ``DATABASE_URL`` when set; otherwise it is
assembled from the ``POSTGRES_*`` variables.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    app_name: str = Field(default="Barrique", description="Service name reported by the health check")
    app_version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # Database
    database_url: Optional[str] = Field(default=None, description="SQLAlchemy URL; wins over POSTGRES_*")
    postgres_user: str = "barrique"
    postgres_password: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "barrique"
    db_echo: bool = Field(default=False, description="Echo SQL statements")
    db_init_attempts: int = Field(default=8, ge=1, description="Schema creation attempts at startup")
    db_init_delay_sec: float = Field(default=2.0, ge=0)

    # Identity forwarded by the authenticating proxy
    auth_user_header: str = Field(
        default="X-Auth-Request-User",
        description="Header carrying the authenticated username",
    )

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8080"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    api_prefix: str = "/api"
    api_title: str = "Barrique API"
    api_description: str = "BucksBuddy journey budgets and RecipeVault recipe collections"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.strip().lower())
        return v

    @model_validator(mode="after")
    def assemble_database_url(self):
        if not self.database_url:
            credentials = self.postgres_user
            if self.postgres_password:
                credentials = f"{credentials}:{self.postgres_password}"
            self.database_url = (
                f"postgresql+psycopg2://{credentials}@{self.postgres_host}:"
                f"{self.postgres_port}/{self.postgres_db}"
            )
        return self

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


settings = Settings()
