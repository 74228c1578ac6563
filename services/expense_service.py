from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Expense
from domain.schemas.journey_schemas import ExpenseCreate, ExpenseUpdate
from repositories import ExpenseRepository, JourneyRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("barrique.bucksbuddy.expense")

# Only these fields are copied on update; id and journey linkage never change
_UPDATABLE_FIELDS = ("name", "amount", "date")


class ExpenseService:
    @staticmethod
    def get_all_expense_by_journey_id(
        db: Session, journey_id: int, user_id: int
    ) -> List[Expense]:
        """Expenses of a journey, only if the journey belongs to ``user_id``"""
        return ExpenseRepository(db).find_all_by_journey_and_user(journey_id, user_id)

    @staticmethod
    def get_expense_by_id(db: Session, expense_id: int) -> Optional[Expense]:
        return ExpenseRepository(db).get_by_id(expense_id)

    @staticmethod
    def create_expense(db: Session, journey_id: int, data: ExpenseCreate) -> Expense:
        """
        Create an expense under a journey.

        The expense is appended to the journey's collection and its journey
        reference set in the same step, then persisted.

        Args:
            db: Database session
            journey_id: Parent journey id
            data: Expense fields

        Returns:
            Expense: The persisted expense

        Raises:
            NotFoundError: If the journey does not exist
        """
        journey = JourneyRepository(db).get_by_id(journey_id)
        if journey is None:
            raise NotFoundError(
                f"Journey not found for id: {journey_id}",
                details={"journey_id": journey_id},
            )

        expense = Expense(**data.model_dump())
        try:
            journey.add_expense(expense)
            db.add(expense)
            db.commit()
            db.refresh(expense)
        except Exception:
            db.rollback()
            logger.exception("Error creating expense for journey %s", journey_id)
            raise

        logger.info(
            "expense_created expense_id=%s journey_id=%s amount=%s",
            expense.expense_id,
            journey_id,
            expense.amount,
        )
        return expense

    @staticmethod
    def update_expense(
        db: Session, expense_id: int, data: ExpenseUpdate
    ) -> Optional[Expense]:
        """
        Copy name, amount and date from ``data`` onto an existing expense.

        Only fields present in the payload are copied.

        Returns:
            The updated expense, or None if it does not exist

        Raises:
            ServiceValidationError: If amount is explicitly set to null
        """
        repo = ExpenseRepository(db)
        expense = repo.get_by_id(expense_id)
        if expense is None:
            return None

        changes = data.model_dump(exclude_unset=True)
        if "amount" in changes and changes["amount"] is None:
            raise ServiceValidationError(
                "Expense amount cannot be null", details={"expense_id": expense_id}
            )

        for key in _UPDATABLE_FIELDS:
            if key in changes:
                setattr(expense, key, changes[key])
        expense = repo.update(expense)
        logger.info("expense_updated expense_id=%s fields=%s", expense_id, sorted(changes))
        return expense

    @staticmethod
    def delete_expense(db: Session, expense_id: int) -> bool:
        """
        Delete an expense, detaching it from its journey's collection first.

        Returns:
            True if deleted, False if no such expense
        """
        expense = ExpenseRepository(db).get_by_id(expense_id)
        if expense is None:
            return False

        journey = expense.journey
        try:
            if journey is not None:
                journey.remove_expense(expense)
            db.delete(expense)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting expense %s", expense_id)
            raise

        logger.info(
            "expense_deleted expense_id=%s journey_id=%s",
            expense_id,
            journey.journey_id if journey is not None else None,
        )
        return True
