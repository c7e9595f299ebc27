import logging
from typing import Any, Dict, List, Optional

from chore_tracker.models import (
    Chore,
    ChoreInsert,
    Household,
    HouseholdInsert,
    User,
    UserInsert,
)
from chore_tracker.repositories.chore_repository import ChoreRepository
from chore_tracker.repositories.household_repository import HouseholdRepository
from chore_tracker.repositories.userRepository import UserRepository
from chore_tracker.storage.interface import NotFoundError, Storage

logger = logging.getLogger(__name__)


class MemStorage(Storage):
    """
    Process-local storage backed by in-memory tables.

    Every instance starts empty with all id counters at 1. Nothing is
    persisted; state lives exactly as long as the instance.
    """

    def __init__(self):
        self.users = UserRepository()
        self.households = HouseholdRepository()
        self.chores = ChoreRepository()

    def get_user(self, id: int) -> Optional[User]:
        return self.users.get(id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.get_by_username(username)

    def create_user(self, data: UserInsert) -> User:
        return self.users.create_from_dict(
            {**data.model_dump(), "household_id": None, "is_household_admin": False}
        )

    def update_user(self, id: int, data: Dict[str, Any]) -> User:
        user = self.users.update(id, data)
        if user is None:
            raise NotFoundError("User", id)
        return user

    def get_household(self, id: int) -> Optional[Household]:
        return self.households.get(id)

    def create_household(self, data: HouseholdInsert) -> Household:
        return self.households.create_from_dict(data.model_dump())

    def get_household_members(self, household_id: int) -> List[User]:
        return self.users.get_by_household(household_id)

    def add_user_to_household(
        self, user_id: int, household_id: int, is_admin: bool = False
    ) -> User:
        if not self.users.exists(user_id):
            raise NotFoundError("User", user_id)
        if not self.households.exists(household_id):
            raise NotFoundError("Household", household_id)

        logger.debug(
            "Adding user %s to household %s (admin=%s)", user_id, household_id, is_admin
        )
        return self.update_user(
            user_id, {"household_id": household_id, "is_household_admin": is_admin}
        )

    def get_chore(self, id: int) -> Optional[Chore]:
        return self.chores.get(id)

    def get_chores_by_household_id(self, household_id: int) -> List[Chore]:
        return self.chores.get_by_household(household_id)

    def get_chores_by_user_id(self, user_id: int) -> List[Chore]:
        return self.chores.get_by_user(user_id)

    def create_chore(self, data: ChoreInsert, user_id: int, household_id: int) -> Chore:
        return self.chores.create_from_dict(
            {
                "name": data.name,
                "reward": data.reward,
                "user_id": user_id,
                "household_id": household_id,
                "completed": False,
                "assigned_to": data.assigned_to or None,
            }
        )

    def delete_chore(self, id: int) -> None:
        self.chores.delete(id)

    def toggle_chore(self, id: int) -> Chore:
        chore = self.chores.get(id)
        if chore is None:
            raise NotFoundError("Chore", id)
        return self.chores.update(id, {"completed": not chore.completed})

    def assign_chore(self, chore_id: int, user_id: int) -> Chore:
        if not self.chores.exists(chore_id):
            raise NotFoundError("Chore", chore_id)
        if not self.users.exists(user_id):
            raise NotFoundError("User", user_id)
        return self.chores.update(chore_id, {"assigned_to": user_id})
