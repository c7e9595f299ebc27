"""
Abstract storage interface.

The HTTP layer and the services talk to storage only through ``Storage``.
Implementations know nothing about HTTP: lookups return ``None`` for an
absent entity, and mutations on an unknown id raise ``NotFoundError``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from chore_tracker.models import (
    Chore,
    ChoreInsert,
    Household,
    HouseholdInsert,
    User,
    UserInsert,
)


class StorageError(Exception):
    """Base class for storage failures."""


class NotFoundError(StorageError, LookupError):
    """Raised when a mutation refers to an entity that does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class Storage(ABC):
    """Operations over users, households and chores."""

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    @abstractmethod
    def get_user(self, id: int) -> Optional[User]:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    def create_user(self, data: UserInsert) -> User:
        """Create a user with no household and no admin flag."""
        pass

    @abstractmethod
    def update_user(self, id: int, data: Dict[str, Any]) -> User:
        """
        Merge data into the user.

        Raises:
            NotFoundError: If the user does not exist
        """
        pass

    # ------------------------------------------------------------------
    # Households
    # ------------------------------------------------------------------
    @abstractmethod
    def get_household(self, id: int) -> Optional[Household]:
        pass

    @abstractmethod
    def create_household(self, data: HouseholdInsert) -> Household:
        pass

    @abstractmethod
    def get_household_members(self, household_id: int) -> List[User]:
        pass

    @abstractmethod
    def add_user_to_household(
        self, user_id: int, household_id: int, is_admin: bool = False
    ) -> User:
        """
        Move a user into a household, setting the admin flag at the same time.

        Raises:
            NotFoundError: If the user or the household does not exist
        """
        pass

    # ------------------------------------------------------------------
    # Chores
    # ------------------------------------------------------------------
    @abstractmethod
    def get_chore(self, id: int) -> Optional[Chore]:
        pass

    @abstractmethod
    def get_chores_by_household_id(self, household_id: int) -> List[Chore]:
        pass

    @abstractmethod
    def get_chores_by_user_id(self, user_id: int) -> List[Chore]:
        """Chores the user created or is assigned to."""
        pass

    @abstractmethod
    def create_chore(self, data: ChoreInsert, user_id: int, household_id: int) -> Chore:
        pass

    @abstractmethod
    def delete_chore(self, id: int) -> None:
        """Remove a chore. Unknown ids are ignored."""
        pass

    @abstractmethod
    def toggle_chore(self, id: int) -> Chore:
        """
        Flip the completed flag.

        Raises:
            NotFoundError: If the chore does not exist
        """
        pass

    @abstractmethod
    def assign_chore(self, chore_id: int, user_id: int) -> Chore:
        """
        Set the chore's assignee.

        Does not check that the assignee belongs to the chore's household;
        callers enforce that.

        Raises:
            NotFoundError: If the chore or the user does not exist
        """
        pass
