"""BucksBuddy journey routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_current_user, get_db
from api.responses import OWNER_SCOPED_RESPONSES
from domain.models import AppUser
from domain.schemas.journey_schemas import (
    JourneyCreate,
    JourneyUpdate,
    JourneyResponse,
    JourneyBudgetSummary,
)
from services.journey_service import JourneyService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/journey", tags=["Journeys"], responses=OWNER_SCOPED_RESPONSES)


@router.get("", response_model=List[JourneyResponse])
def get_journeys(
    user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)
):
    """List the current user's journeys, earliest first"""
    journeys = JourneyService.get_journeys_for_user(db, user.id)
    return [JourneyResponse.model_validate(j) for j in journeys]


@router.post("", response_model=JourneyResponse, status_code=status.HTTP_201_CREATED)
def create_journey(
    journey: JourneyCreate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    created = JourneyService.create_journey(db, user, journey)
    return JourneyResponse.model_validate(created)


@router.get("/{journey_id}", response_model=JourneyResponse)
def get_journey(
    journey_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a journey with its expenses"""
    journey = JourneyService.get_authorized_journey(db, journey_id, user)
    return JourneyResponse.model_validate(journey)


@router.put("/{journey_id}", response_model=JourneyResponse)
def update_journey(
    journey_id: int,
    journey: JourneyUpdate,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    JourneyService.get_authorized_journey(db, journey_id, user)
    updated = JourneyService.update_journey(db, journey_id, journey)
    if updated is None:
        raise NotFoundError(f"Journey {journey_id} not found")
    return JourneyResponse.model_validate(updated)


@router.delete(
    "/{journey_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_journey(
    journey_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a journey and all of its expenses"""
    JourneyService.get_authorized_journey(db, journey_id, user)
    if not JourneyService.delete_journey(db, journey_id):
        raise NotFoundError(f"Journey {journey_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{journey_id}/summary", response_model=JourneyBudgetSummary)
def get_budget_summary(
    journey_id: int,
    user: AppUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Budget tracking for a journey.

    Returns the budget, the total spent across all expenses, what remains,
    and a per-day breakdown of spending.
    """
    JourneyService.get_authorized_journey(db, journey_id, user)
    return JourneyService.get_budget_summary(db, journey_id, user.id)
