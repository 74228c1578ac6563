"""User account routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import get_current_user, get_db
from domain.models import AppUser
from domain.schemas.user_schemas import UserCreate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a user record for an identity managed upstream"""
    new_user = UserService.create_user(db, user.username, user.email)
    return UserResponse.model_validate(new_user)


@router.get("/me", response_model=UserResponse)
def get_me(user: AppUser = Depends(get_current_user)):
    """The user resolved from the request's authenticated identity"""
    return UserResponse.model_validate(user)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_me(user: AppUser = Depends(get_current_user), db: Session = Depends(get_db)):
    """Delete the current user with all of their journeys and recipes"""
    UserService.delete_user(db, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
