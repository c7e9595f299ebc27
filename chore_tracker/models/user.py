from typing import Optional
from pydantic import BaseModel
from chore_tracker.models.base import Entity


class User(Entity):
    username: str
    hashed_password: str

    # Membership; a user belongs to at most one household
    household_id: Optional[int] = None
    is_household_admin: bool = False


class UserInsert(BaseModel):
    username: str
    hashed_password: str
