"""
Journey Repository - Data access layer for journeys
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Journey


class JourneyRepository(BaseRepository[Journey]):
    """Repository for journey data access"""

    def __init__(self, db: Session):
        super().__init__(db, Journey)

    def get_by_user_id(self, user_id: int) -> List[Journey]:
        """Get all journeys owned by a user, earliest first"""
        return (
            self.db.query(Journey)
            .filter(Journey.user_id == user_id)
            .order_by(Journey.start_date, Journey.journey_id)
            .all()
        )

    def get_by_id_and_user(self, journey_id: int, user_id: int) -> Optional[Journey]:
        """Get a journey only if it belongs to the given user"""
        return (
            self.db.query(Journey)
            .filter(Journey.journey_id == journey_id, Journey.user_id == user_id)
            .first()
        )
