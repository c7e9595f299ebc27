from chore_tracker.models.base import Entity
from chore_tracker.models.user import User, UserInsert
from chore_tracker.models.household import Household, HouseholdInsert
from chore_tracker.models.chore import Chore, ChoreInsert

__all__ = [
    # Base
    "Entity",
    # User
    "User",
    "UserInsert",
    # Household
    "Household",
    "HouseholdInsert",
    # Chore
    "Chore",
    "ChoreInsert",
]
