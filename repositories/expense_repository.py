"""
Expense Repository - Data access layer for journey expenses
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Expense, Journey


class ExpenseRepository(BaseRepository[Expense]):
    def __init__(self, db: Session):
        super().__init__(db, Expense)

    def find_all_by_journey_and_user(self, journey_id: int, user_id: int) -> List[Expense]:
        """Expenses of a journey, restricted to journeys owned by ``user_id``"""
        return (
            self._owned_children(Journey, journey_id, user_id)
            .order_by(Expense.date, Expense.expense_id)
            .all()
        )
