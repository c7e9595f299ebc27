from typing import List
from chore_tracker.models.chore import Chore
from chore_tracker.repositories.repository import BaseRepository


class ChoreRepository(BaseRepository[Chore]):
    """Repository for chore operations."""

    def __init__(self):
        super().__init__(Chore)

    def get_by_household(self, household_id: int) -> List[Chore]:
        """Get all chores owned by a household."""
        return self.filter(lambda chore: chore.household_id == household_id)

    def get_by_user(self, user_id: int) -> List[Chore]:
        """Get chores a user created or is assigned to."""
        return self.filter(
            lambda chore: chore.user_id == user_id or chore.assigned_to == user_id
        )
