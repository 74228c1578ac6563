from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for registering a user record"""

    username: str = Field(..., min_length=1, max_length=150)
    email: Optional[str] = Field(None, max_length=320)


class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
