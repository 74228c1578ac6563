"""
Tests for the repository classes against a real (in-memory) database.

- UserRepository: creation, username lookup, duplicate usernames
- JourneyRepository: per-user listing and owner-scoped lookup
- ExpenseRepository: per-journey-per-user query
- RecipeRepository / RecipeComponentRepository: favorites filter, step ordering
"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from sqlalchemy.orm import Session

from test_fixtures import db_session, unique_username
from repositories import (
    UserRepository,
    JourneyRepository,
    ExpenseRepository,
    RecipeRepository,
    RecipeComponentRepository,
)
from domain.models import Journey, Expense, Recipe, RecipeStep, Tag
from app.exceptions import ConflictError


def _journey(user_id: int, name: str = "Kyoto", start: date = date(2024, 4, 1)) -> Journey:
    return Journey(
        user_id=user_id,
        name=name,
        home_curr="EUR",
        vac_curr="JPY",
        budget=2500,
        start_date=start,
        end_date=start + timedelta(days=9),
    )


# =============================================================================
# USER REPOSITORY TESTS
# =============================================================================


def test_user_repository_create_and_get_by_username(db_session: Session):
    repo = UserRepository(db_session)
    username = unique_username("sarah")

    user = repo.create_user(username=username, email="sarah@example.com")

    assert user.id is not None
    assert user.created_at is not None
    assert repo.get_by_username(username).id == user.id
    assert repo.get_by_id(user.id).username == username
    assert repo.get_by_username("nobody") is None


def test_user_repository_duplicate_username(db_session: Session):
    repo = UserRepository(db_session)
    username = unique_username("dup")
    repo.create_user(username=username)

    with pytest.raises(ConflictError):
        repo.create_user(username=username)

    # Session is usable again after the rollback
    assert repo.get_by_username(username) is not None


# =============================================================================
# JOURNEY / EXPENSE REPOSITORY TESTS
# =============================================================================


def test_journey_repository_scoped_to_owner(db_session: Session):
    users = UserRepository(db_session)
    alice = users.create_user(unique_username("alice"))
    bob = users.create_user(unique_username("bob"))
    repo = JourneyRepository(db_session)

    later = repo.create(_journey(alice.id, "Later trip", date(2024, 8, 1)))
    earlier = repo.create(_journey(alice.id, "Earlier trip", date(2024, 2, 1)))
    repo.create(_journey(bob.id, "Bob's trip"))

    journeys = repo.get_by_user_id(alice.id)
    assert [j.journey_id for j in journeys] == [earlier.journey_id, later.journey_id]

    assert repo.get_by_id_and_user(later.journey_id, alice.id) is not None
    assert repo.get_by_id_and_user(later.journey_id, bob.id) is None


def test_expense_repository_filters_by_journey_and_user(db_session: Session):
    users = UserRepository(db_session)
    alice = users.create_user(unique_username("alice"))
    bob = users.create_user(unique_username("bob"))
    journeys = JourneyRepository(db_session)
    kyoto = journeys.create(_journey(alice.id, "Kyoto"))
    osaka = journeys.create(_journey(alice.id, "Osaka"))

    repo = ExpenseRepository(db_session)
    ramen = repo.create(
        Expense(journey_id=kyoto.journey_id, name="Ramen", amount=Decimal("12.50"), date=date(2024, 4, 2))
    )
    repo.create(
        Expense(journey_id=osaka.journey_id, name="Takoyaki", amount=Decimal("6.00"), date=date(2024, 4, 3))
    )

    found = repo.find_all_by_journey_and_user(kyoto.journey_id, alice.id)
    assert [e.expense_id for e in found] == [ramen.expense_id]

    # Same journey id, wrong owner: nothing comes back
    assert repo.find_all_by_journey_and_user(kyoto.journey_id, bob.id) == []


# =============================================================================
# RECIPE REPOSITORY TESTS
# =============================================================================


def test_recipe_repository_favorite_filter(db_session: Session):
    user = UserRepository(db_session).create_user(unique_username("cook"))
    repo = RecipeRepository(db_session)
    repo.create(Recipe(user_id=user.id, title="Dal", favorite=True))
    repo.create(Recipe(user_id=user.id, title="Bibimbap", favorite=False))

    assert [r.title for r in repo.get_by_user_id(user.id)] == ["Bibimbap", "Dal"]
    assert [r.title for r in repo.get_by_user_id(user.id, favorite=True)] == ["Dal"]
    assert [r.title for r in repo.get_by_user_id(user.id, favorite=False)] == ["Bibimbap"]


def test_component_repository_orders_steps_and_checks_owner(db_session: Session):
    users = UserRepository(db_session)
    cook = users.create_user(unique_username("cook"))
    other = users.create_user(unique_username("other"))

    recipe = Recipe(user_id=cook.id, title="Focaccia")
    recipe.add_step(RecipeStep(step_number=3, step_description="Bake"))
    recipe.add_step(RecipeStep(step_number=1, step_description="Mix"))
    recipe.add_step(RecipeStep(step_number=2, step_description="Proof"))
    recipe.add_tag(Tag(name="bread"))
    recipe = RecipeRepository(db_session).create(recipe)

    steps = RecipeComponentRepository(db_session, RecipeStep)
    ordered = steps.find_all_by_recipe_and_user(recipe.recipe_id, cook.id)
    assert [s.step_number for s in ordered] == [1, 2, 3]
    assert steps.find_all_by_recipe_and_user(recipe.recipe_id, other.id) == []

    tags = RecipeComponentRepository(db_session, Tag)
    assert [t.name for t in tags.find_all_by_recipe_and_user(recipe.recipe_id, cook.id)] == ["bread"]


def test_removed_component_is_deleted_as_orphan(db_session: Session):
    cook = UserRepository(db_session).create_user(unique_username("cook"))
    recipe = Recipe(user_id=cook.id, title="Granola")
    oats = Tag(name="breakfast")
    recipe.add_tag(oats)
    recipe.add_tag(Tag(name="baked"))
    repo = RecipeRepository(db_session)
    recipe = repo.create(recipe)

    recipe.remove_tag(oats)
    assert oats.recipe is None
    repo.update(recipe)

    assert [t.name for t in recipe.tags] == ["baked"]
    assert db_session.query(Tag).count() == 1
