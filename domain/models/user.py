"""
User account model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class AppUser(Base):
    """Account owning journeys and recipes"""

    __tablename__ = "app_user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    email = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    journeys = relationship(
        "Journey",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Journey.start_date",
    )
    recipes = relationship(
        "Recipe", back_populates="user", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<AppUser(id={self.id}, username={self.username})>"
