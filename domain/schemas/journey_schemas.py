from pydantic import BaseModel, Field, model_validator
from typing import Optional, List
import datetime as dt
from decimal import Decimal


class ExpenseCreate(BaseModel):
    """Schema for creating an expense under a journey"""

    name: Optional[str] = Field(None, max_length=255)
    amount: Decimal = Field(..., description="Amount spent, in the journey's currency")
    date: Optional[dt.date] = Field(None, description="Day of the expense (yyyy-MM-dd)")


class ExpenseUpdate(BaseModel):
    """Schema for updating an expense; only the fields sent are copied"""

    name: Optional[str] = Field(None, max_length=255)
    amount: Optional[Decimal] = None
    date: Optional[dt.date] = None


class ExpenseResponse(BaseModel):
    expense_id: int
    journey_id: int
    name: Optional[str] = None
    amount: Decimal
    date: Optional[dt.date] = None

    model_config = {"from_attributes": True}


class JourneyCreate(BaseModel):
    """Schema for creating a journey"""

    name: str = Field(..., min_length=1, max_length=255)
    home_curr: str = Field(..., min_length=1, max_length=10, description="Home currency code")
    vac_curr: str = Field(..., min_length=1, max_length=10, description="Vacation currency code")
    budget: int = Field(..., ge=0, description="Budget in home currency")
    start_date: dt.date
    end_date: dt.date

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class JourneyUpdate(BaseModel):
    """Schema for updating a journey; only the fields sent are copied"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    home_curr: Optional[str] = Field(None, min_length=1, max_length=10)
    vac_curr: Optional[str] = Field(None, min_length=1, max_length=10)
    budget: Optional[int] = Field(None, ge=0)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None


class JourneyResponse(BaseModel):
    journey_id: int
    user_id: int
    name: str
    home_curr: str
    vac_curr: str
    budget: int
    start_date: dt.date
    end_date: dt.date
    expenses: List[ExpenseResponse] = []

    model_config = {"from_attributes": True}


class DailySpend(BaseModel):
    """Total spent on one day of a journey"""

    date: Optional[dt.date] = None
    total: Decimal
    expense_count: int


class JourneyBudgetSummary(BaseModel):
    """Budget tracking figures for a journey"""

    journey_id: int
    home_curr: str
    vac_curr: str
    budget: Decimal
    total_spent: Decimal
    remaining: Decimal
    expense_count: int
    over_budget: bool
    daily: List[DailySpend] = []
