from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class HouseholdBase(BaseModel):
    """Base household schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100, description="Household name")


class HouseholdCreate(HouseholdBase):
    """Schema for creating a new household."""
    pass


class HouseholdResponse(HouseholdBase):
    """Schema for household response."""
    id: int
    created_by_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
