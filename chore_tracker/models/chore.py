from typing import Optional
from pydantic import BaseModel
from chore_tracker.models.base import Entity


class Chore(Entity):
    """
    A task with a reward, owned by a household.
    user_id is the creator; assigned_to is the member responsible for it.
    """

    name: str
    reward: int
    household_id: int
    user_id: int
    assigned_to: Optional[int] = None
    completed: bool = False


class ChoreInsert(BaseModel):
    name: str
    reward: int
    assigned_to: Optional[int] = None
