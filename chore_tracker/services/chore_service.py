import logging
from typing import List, Optional
from chore_tracker.models.chore import Chore, ChoreInsert
from chore_tracker.models.user import User
from chore_tracker.schemas.chore import ChoreCreate
from chore_tracker.storage import Storage
from chore_tracker.core.exception import (
    ResourceNotFoundException,
    BadRequestException,
    InvalidStateException,
)

logger = logging.getLogger(__name__)


class ChoreService:
    """
    Service layer for chore operations.

    Every operation is scoped to the caller's current household. A chore in
    another household is reported as missing rather than forbidden.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    def list_chores(self, user: User) -> List[Chore]:
        """Get all chores of the user's household."""
        household_id = self._require_household(user)
        return self.storage.get_chores_by_household_id(household_id)

    def list_my_chores(self, user: User) -> List[Chore]:
        """Get chores the user created or is assigned to, in their current household."""
        household_id = self._require_household(user)
        return [
            chore
            for chore in self.storage.get_chores_by_user_id(user.id)
            if chore.household_id == household_id
        ]

    def create_chore(self, user: User, data: ChoreCreate) -> Chore:
        """
        Create a chore in the user's household.

        Raises:
            InvalidStateException: If the user has no household
            BadRequestException: If the assignee is not a household member
        """
        household_id = self._require_household(user)

        if data.assigned_to:
            self._require_member(data.assigned_to, household_id)

        chore = self.storage.create_chore(
            ChoreInsert(**data.model_dump()),
            user_id=user.id,
            household_id=household_id,
        )
        logger.info("User %s created chore %s in household %s", user.id, chore.id, household_id)
        return chore

    def assign_chore(self, chore_id: int, user: User, assignee_id: int) -> Chore:
        """
        Assign a chore to a member of the same household.

        Raises:
            ResourceNotFoundException: If chore not found in the user's household
            BadRequestException: If the assignee is not a household member
        """
        chore = self._get_household_chore(chore_id, user)
        self._require_member(assignee_id, chore.household_id)

        updated = self.storage.assign_chore(chore.id, assignee_id)
        logger.info("Chore %s assigned to user %s", chore.id, assignee_id)
        return updated

    def toggle_chore(self, chore_id: int, user: User) -> Chore:
        """Flip a chore between complete and incomplete."""
        chore = self._get_household_chore(chore_id, user)
        updated = self.storage.toggle_chore(chore.id)
        logger.info("Chore %s marked completed=%s by user %s", chore.id, updated.completed, user.id)
        return updated

    def delete_chore(self, chore_id: int, user: User) -> None:
        """Delete a chore from the user's household."""
        chore = self._get_household_chore(chore_id, user)
        self.storage.delete_chore(chore.id)
        logger.info("Chore %s deleted by user %s", chore.id, user.id)

    def _require_household(self, user: User) -> int:
        if not user.household_id:
            raise InvalidStateException("Not part of a household")
        return user.household_id

    def _require_member(self, user_id: int, household_id: int) -> User:
        member: Optional[User] = self.storage.get_user(user_id)
        if not member or member.household_id != household_id:
            raise BadRequestException("Invalid user assignment")
        return member

    def _get_household_chore(self, chore_id: int, user: User) -> Chore:
        chore = self.storage.get_chore(chore_id)
        if not chore or chore.household_id != user.household_id:
            raise ResourceNotFoundException("Chore", chore_id)
        return chore
