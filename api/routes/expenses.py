"""BucksBuddy expense routes, nested under a journey"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_current_user, get_db
from api.responses import OWNER_SCOPED_RESPONSES
from domain.models import AppUser, Expense
from domain.schemas.journey_schemas import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from services.expense_service import ExpenseService
from services.journey_service import JourneyService
from app.exceptions import NotFoundError

router = APIRouter(
    prefix="/journey/{journey_id}/expense",
    tags=["Expenses"],
    responses=OWNER_SCOPED_RESPONSES,
)


def _load_expense(db: Session, journey_id: int, expense_id: int) -> Expense:
    """Fetch an expense, treating one that hangs off another journey as absent"""
    expense = ExpenseService.get_expense_by_id(db, expense_id)
    if expense is None or expense.journey_id != journey_id:
        raise NotFoundError(
            f"Expense {expense_id} not found in journey {journey_id}",
            details={"journey_id": journey_id, "expense_id": expense_id},
        )
    return expense


@router.get("", response_model=List[ExpenseResponse])
def get_all_expense_by_journey_id(
    journey_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the expenses of one of the current user's journeys"""
    JourneyService.get_authorized_journey(db, journey_id, user)
    expenses = ExpenseService.get_all_expense_by_journey_id(db, journey_id, user.id)
    return [ExpenseResponse.model_validate(e) for e in expenses]


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense_by_id(
    journey_id: int,
    expense_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    JourneyService.get_authorized_journey(db, journey_id, user)
    return ExpenseResponse.model_validate(_load_expense(db, journey_id, expense_id))


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
    journey_id: int,
    expense: ExpenseCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Record a new expense on the journey"""
    JourneyService.get_authorized_journey(db, journey_id, user)
    created = ExpenseService.create_expense(db, journey_id, expense)
    return ExpenseResponse.model_validate(created)


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    journey_id: int,
    expense_id: int,
    expense: ExpenseUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update name, amount and date of an expense"""
    JourneyService.get_authorized_journey(db, journey_id, user)
    _load_expense(db, journey_id, expense_id)
    updated = ExpenseService.update_expense(db, expense_id, expense)
    if updated is None:
        raise NotFoundError(f"Expense {expense_id} not found")
    return ExpenseResponse.model_validate(updated)


@router.delete(
    "/{expense_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_expense(
    journey_id: int,
    expense_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    JourneyService.get_authorized_journey(db, journey_id, user)
    _load_expense(db, journey_id, expense_id)
    if not ExpenseService.delete_expense(db, expense_id):
        raise NotFoundError(f"Expense {expense_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
