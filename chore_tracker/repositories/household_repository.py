from chore_tracker.models.household import Household
from chore_tracker.repositories.repository import BaseRepository


class HouseholdRepository(BaseRepository[Household]):
    """Repository for household operations. Membership queries live on UserRepository."""

    def __init__(self):
        super().__init__(Household)
