"""
Shared test fixtures and utilities for the Barrique test suite.

This module contains common mock objects, helper functions, and test client setup
that are reused across multiple test files to ensure consistency and reduce duplication.
"""

import uuid
from types import SimpleNamespace
from datetime import datetime, date, timedelta, timezone
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker, Session

from main import app
from api.dependencies import get_current_user, get_db
from domain.models import Base, build_engine

# Module-level client for tests that monkeypatch the service layer
client = TestClient(app)


def unique_username(prefix: str = "traveller") -> str:
    """Generate a unique username using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def auth_headers(username: str) -> dict:
    """Headers an authenticating proxy would forward for ``username``"""
    return {"X-Auth-Request-User": username}


# =============================================================================
# MOCK FACTORIES
# =============================================================================


def make_user(user_id=None, username=None, email=None):
    """
    Create a mock user object for testing.

    Example:
        >>> user = make_user()
        >>> user.username.startswith("traveller-")
        True
    """
    return SimpleNamespace(
        id=user_id or 1,
        username=username or unique_username(),
        email=email,
        created_at=datetime.now(timezone.utc),
    )


def make_expense(expense_id=None, journey_id=None, name="Gelato", amount=Decimal("4.50"), day=None):
    """Create a mock expense; defaults to a small realistic spend"""
    return SimpleNamespace(
        expense_id=expense_id or 1,
        journey_id=journey_id or 1,
        name=name,
        amount=amount,
        date=day or date(2024, 6, 3),
    )


def make_journey(journey_id=None, user_id=None, expenses=None, budget=1500):
    """
    Create a mock journey: a two week trip to Italy paid from a EUR budget.
    """
    start = date(2024, 6, 1)
    return SimpleNamespace(
        journey_id=journey_id or 1,
        user_id=user_id or 1,
        name="Italy 2024",
        home_curr="EUR",
        vac_curr="EUR",
        budget=budget,
        start_date=start,
        end_date=start + timedelta(days=14),
        expenses=expenses or [],
    )


def make_recipe(recipe_id=None, user_id=None, title="Shakshuka", **components):
    """Create a mock recipe with empty component collections unless given"""
    return SimpleNamespace(
        recipe_id=recipe_id or 1,
        user_id=user_id or 1,
        title=title,
        description="Eggs poached in spiced tomato sauce",
        image_url=None,
        favorite=False,
        time="30 min",
        source_url=None,
        servings=2,
        portion_size=350,
        ingredients=components.get("ingredients", []),
        nutritional_values=components.get("nutritional_values", []),
        steps=components.get("steps", []),
        tools=components.get("tools", []),
        tags=components.get("tags", []),
    )


JOURNEY_PAYLOAD = {
    "name": "Lisbon long weekend",
    "home_curr": "EUR",
    "vac_curr": "EUR",
    "budget": 800,
    "start_date": "2024-09-12",
    "end_date": "2024-09-16",
}

RECIPE_PAYLOAD = {
    "title": "Pasta al pomodoro",
    "description": "Weeknight tomato pasta",
    "time": "25 min",
    "servings": 2,
    "portion_size": 300,
    "ingredients": [
        {"name": "spaghetti", "quantity": "200", "unit": "g"},
        {"name": "passata", "quantity": "400", "unit": "ml"},
    ],
    "nutritional_values": [{"name": "protein", "amount": "14", "unit": "g"}],
    "steps": [
        {"step_number": 2, "step_description": "Simmer the sauce"},
        {"step_number": 1, "step_description": "Boil the pasta"},
    ],
    "tools": [{"name": "saucepan"}],
    "tags": [{"name": "vegetarian"}],
}


# =============================================================================
# DATABASE SESSION FIXTURES
# =============================================================================

_engine = build_engine("sqlite+pysqlite:///:memory:")
TestingSessionLocal = sessionmaker(bind=_engine, autoflush=False, future=True)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a database session backed by a fresh in-memory schema.

    Each test gets empty tables; everything is dropped afterwards.
    """
    Base.metadata.create_all(bind=_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=_engine)


@pytest.fixture(scope="function")
def api_client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose routes share the test's database session"""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def current_user():
    """Mock user injected as the authenticated identity (no database needed)"""
    user = make_user(user_id=7)
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_db] = lambda: None
    try:
        yield user
    finally:
        app.dependency_overrides.clear()
