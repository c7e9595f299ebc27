from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ChoreBase(BaseModel):
    """Base chore schema with common fields."""
    name: str = Field(..., min_length=1, max_length=200, description="Chore name")
    reward: int = Field(..., ge=0, description="Reward earned for completing the chore")


class ChoreCreate(ChoreBase):
    """Schema for creating a chore in the caller's household."""
    assigned_to: Optional[int] = Field(None, description="User ID of the assignee")


class ChoreAssignRequest(BaseModel):
    """Schema for assigning a chore to a household member."""
    user_id: int = Field(..., description="User ID of the member to assign")


class ChoreResponse(ChoreBase):
    """Schema for chore response."""
    id: int
    household_id: int
    user_id: int
    assigned_to: Optional[int] = None
    completed: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
