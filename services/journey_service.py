from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import AppUser, Journey
from domain.schemas.journey_schemas import (
    JourneyCreate,
    JourneyUpdate,
    JourneyBudgetSummary,
    DailySpend,
)
from repositories import JourneyRepository, ExpenseRepository
from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError

logger = logging.getLogger("barrique.bucksbuddy.journey")

_UPDATABLE_FIELDS = ("name", "home_curr", "vac_curr", "budget", "start_date", "end_date")


class JourneyService:
    @staticmethod
    def get_journeys_for_user(db: Session, user_id: int) -> List[Journey]:
        return JourneyRepository(db).get_by_user_id(user_id)

    @staticmethod
    def get_journey_by_id(db: Session, journey_id: int) -> Optional[Journey]:
        return JourneyRepository(db).get_by_id(journey_id)

    @staticmethod
    def get_authorized_journey(db: Session, journey_id: int, user: AppUser) -> Journey:
        """
        Load a journey and verify that ``user`` owns it.

        Every journey and expense endpoint goes through this check before
        touching the journey or its expenses.

        Raises:
            NotFoundError: If the journey does not exist
            ForbiddenError: If the journey belongs to another user
        """
        journey = JourneyRepository(db).get_by_id(journey_id)
        if journey is None:
            raise NotFoundError(f"Journey not found for id: {journey_id}")
        if journey.user_id != user.id:
            logger.warning(
                "journey_access_denied journey_id=%s user_id=%s", journey_id, user.id
            )
            raise ForbiddenError(f"Journey {journey_id} is not owned by the current user")
        return journey

    @staticmethod
    def create_journey(db: Session, user: AppUser, data: JourneyCreate) -> Journey:
        journey = Journey(user_id=user.id, **data.model_dump())
        journey = JourneyRepository(db).create(journey)
        logger.info("journey_created journey_id=%s user_id=%s", journey.journey_id, user.id)
        return journey

    @staticmethod
    def update_journey(
        db: Session, journey_id: int, data: JourneyUpdate
    ) -> Optional[Journey]:
        """
        Copy the fields present in ``data`` onto an existing journey.

        Returns:
            The updated journey, or None if it does not exist

        Raises:
            ServiceValidationError: If a required field is set to null or the
                resulting date range is inverted
        """
        repo = JourneyRepository(db)
        journey = repo.get_by_id(journey_id)
        if journey is None:
            return None

        changes = data.model_dump(exclude_unset=True)
        nulls = [k for k in _UPDATABLE_FIELDS if k in changes and changes[k] is None]
        if nulls:
            raise ServiceValidationError(
                "Journey fields cannot be null", details={"fields": nulls}
            )

        start = changes.get("start_date", journey.start_date)
        end = changes.get("end_date", journey.end_date)
        if end < start:
            raise ServiceValidationError(
                "end_date must not be before start_date",
                details={"start_date": str(start), "end_date": str(end)},
            )

        for key in _UPDATABLE_FIELDS:
            if key in changes:
                setattr(journey, key, changes[key])
        journey = repo.update(journey)
        logger.info("journey_updated journey_id=%s fields=%s", journey_id, sorted(changes))
        return journey

    @staticmethod
    def delete_journey(db: Session, journey_id: int) -> bool:
        """Delete a journey; its expenses are removed with it"""
        deleted = JourneyRepository(db).delete(journey_id)
        logger.info("journey_deleted journey_id=%s deleted=%s", journey_id, deleted)
        return deleted

    @staticmethod
    def get_budget_summary(db: Session, journey_id: int, user_id: int) -> JourneyBudgetSummary:
        """
        Compute budget tracking figures for one of the user's journeys.

        Returns:
            Total spent, remaining budget and a per-day breakdown (days in
            date order, undated expenses last)

        Raises:
            NotFoundError: If the user has no journey with this id
        """
        journey = JourneyRepository(db).get_by_id_and_user(journey_id, user_id)
        if journey is None:
            raise NotFoundError(f"Journey not found for id: {journey_id}")

        expenses = ExpenseRepository(db).find_all_by_journey_and_user(journey_id, user_id)

        daily: dict = {}
        total = Decimal("0")
        for expense in sorted(expenses, key=lambda e: (e.date is None, e.date or date.min, e.expense_id)):
            amount = Decimal(expense.amount or 0)
            total += amount
            day_total, count = daily.get(expense.date, (Decimal("0"), 0))
            daily[expense.date] = (day_total + amount, count + 1)

        budget = Decimal(journey.budget)
        remaining = budget - total
        return JourneyBudgetSummary(
            journey_id=journey.journey_id,
            home_curr=journey.home_curr,
            vac_curr=journey.vac_curr,
            budget=budget,
            total_spent=total,
            remaining=remaining,
            expense_count=len(expenses),
            over_budget=remaining < 0,
            daily=[
                DailySpend(date=day, total=day_total, expense_count=count)
                for day, (day_total, count) in daily.items()
            ],
        )
