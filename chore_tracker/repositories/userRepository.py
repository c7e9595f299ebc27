from typing import List, Optional
from chore_tracker.models.user import User
from ..repositories.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self):
        super().__init__(User)

    def get_by_username(self, username: str) -> Optional[User]:
        """Get the earliest-created user with this username."""
        return self.first(lambda user: user.username == username)

    def username_exists(self, username: str) -> bool:
        """Check if username already exists."""
        return self.get_by_username(username) is not None

    def get_by_household(self, household_id: int) -> List[User]:
        """Get all users whose current household is household_id."""
        return self.filter(lambda user: user.household_id == household_id)
