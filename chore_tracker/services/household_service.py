import logging
from typing import List
from chore_tracker.models.household import Household, HouseholdInsert
from chore_tracker.models.user import User
from chore_tracker.schemas.household import HouseholdCreate
from chore_tracker.storage import Storage
from chore_tracker.core.exception import (
    ResourceNotFoundException,
    InvalidStateException,
)

logger = logging.getLogger(__name__)


class HouseholdService:
    """Service layer for household operations."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def create_household(self, user: User, data: HouseholdCreate) -> Household:
        """
        Create a new household with the user as admin.

        A user who already belongs to a household moves to the new one.

        Args:
            user: User creating the household
            data: Household creation data

        Returns:
            Created household
        """
        household = self.storage.create_household(
            HouseholdInsert(name=data.name, created_by_id=user.id)
        )

        # Make the creator an admin
        self.storage.add_user_to_household(user.id, household.id, is_admin=True)

        logger.info("User %s created household %s", user.id, household.id)
        return household

    def get_household(self, household_id: int, user: User) -> Household:
        """
        Get household details.

        Raises:
            ResourceNotFoundException: If household not found or user is not a member
        """
        household = self.storage.get_household(household_id)
        if not household or user.household_id != household.id:
            raise ResourceNotFoundException("Household", household_id)

        return household

    def get_members(self, household_id: int, user: User) -> List[User]:
        """
        Get household members.

        Raises:
            ResourceNotFoundException: If household not found or user is not a member
        """
        household = self.get_household(household_id, user)
        return self.storage.get_household_members(household.id)

    def join_household(self, household_id: int, user: User) -> User:
        """
        Join a household as a regular member.

        Returns:
            The updated user

        Raises:
            ResourceNotFoundException: If household not found
            InvalidStateException: If the user already belongs to a household
        """
        household = self.storage.get_household(household_id)
        if not household:
            raise ResourceNotFoundException("Household")

        if user.household_id:
            raise InvalidStateException("Already in a household")

        updated = self.storage.add_user_to_household(user.id, household.id)
        logger.info("User %s joined household %s", user.id, household.id)
        return updated
