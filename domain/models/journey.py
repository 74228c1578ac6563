"""
BucksBuddy models: budgeted journeys and their expenses.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Date,
    ForeignKey,
    Numeric,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Journey(Base):
    """A budgeted travel period owned by a user"""

    __tablename__ = "journeys"

    journey_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("app_user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    home_curr = Column(Text, nullable=False)
    vac_curr = Column(Text, nullable=False)
    budget = Column(Integer, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    user = relationship("AppUser", back_populates="journeys")
    expenses = relationship(
        "Expense",
        back_populates="journey",
        cascade="all, delete-orphan",
        order_by=lambda: (Expense.date, Expense.expense_id),
    )

    def add_expense(self, expense: "Expense") -> None:
        """Append ``expense`` and point it back at this journey"""
        if expense not in self.expenses:
            self.expenses.append(expense)
        expense.journey = self

    def remove_expense(self, expense: "Expense") -> None:
        """Detach ``expense``; with delete-orphan it is deleted on flush"""
        if expense in self.expenses:
            self.expenses.remove(expense)
        expense.journey = None

    def __repr__(self) -> str:
        return f"<Journey(journey_id={self.journey_id}, name={self.name})>"


class Expense(Base):
    """A single spend record tied to one journey"""

    __tablename__ = "expense"

    expense_id = Column(Integer, primary_key=True, autoincrement=True)
    journey_id = Column(
        Integer,
        ForeignKey("journeys.journey_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text)
    amount = Column(Numeric(12, 2), nullable=False, default=0)
    date = Column(Date)

    journey = relationship("Journey", back_populates="expenses")

    def __repr__(self) -> str:
        return f"<Expense(expense_id={self.expense_id}, amount={self.amount})>"
