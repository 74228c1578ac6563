"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_username(self, username: str) -> Optional[AppUser]:
        """Get user by username"""
        return self.db.query(AppUser).filter(AppUser.username == username).first()

    def create_user(self, username: str, email: str = None) -> AppUser:
        """Create a new user"""
        user = AppUser(username=username, email=email)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(
                f"User with username {username} already exists",
                details={"username": username},
                code="USERNAME_TAKEN",
            )

    def delete_user(self, user_id: int) -> bool:
        """Delete user and all owned journeys and recipes (cascade)"""
        return self.delete(user_id)
