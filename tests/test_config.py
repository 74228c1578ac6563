"""Settings loading"""

from app.config import Settings, Environment


def test_database_url_assembled_from_postgres_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("POSTGRES_USER", "bucks")
    monkeypatch.setenv("POSTGRES_PASSWORD", "s3cret")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_DB", "travel")

    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+psycopg2://bucks:s3cret@db:5432/travel"


def test_explicit_database_url_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///barrique.db")
    monkeypatch.setenv("POSTGRES_HOST", "db")

    assert Settings(_env_file=None).database_url == "sqlite+pysqlite:///barrique.db"


def test_environment_is_normalized(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", " Production ")

    settings = Settings(_env_file=None)
    assert settings.environment is Environment.PRODUCTION
    assert settings.is_production()
    assert not settings.is_testing()
