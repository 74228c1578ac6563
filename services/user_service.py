"""User Service"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from domain.models import AppUser
from repositories import UserRepository

logger = logging.getLogger("barrique.users")


class UserService:
    @staticmethod
    def create_user(db: Session, username: str, email: Optional[str] = None) -> AppUser:
        """
        Register a user record.

        Raises:
            ConflictError: If the username is already taken
        """
        user = UserRepository(db).create_user(username=username, email=email)
        logger.info("user_created id=%s username=%s", user.id, user.username)
        return user

    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[AppUser]:
        return UserRepository(db).get_by_id(user_id)

    @staticmethod
    def get_by_username(db: Session, username: str) -> Optional[AppUser]:
        return UserRepository(db).get_by_username(username)

    @staticmethod
    def delete_user(db: Session, user_id: int) -> bool:
        """Delete a user together with every journey and recipe they own"""
        deleted = UserRepository(db).delete_user(user_id)
        logger.info("user_deleted id=%s deleted=%s", user_id, deleted)
        return deleted
