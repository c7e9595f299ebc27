from typing import Optional
from pydantic import BaseModel
from chore_tracker.models.base import Entity


class Household(Entity):
    """
    A group of users sharing a chore list.
    Members are tracked on User.household_id, not here.
    """

    name: str
    created_by_id: Optional[int] = None


class HouseholdInsert(BaseModel):
    name: str
    created_by_id: Optional[int] = None
