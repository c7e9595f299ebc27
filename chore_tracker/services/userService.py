import logging
from typing import Optional
from chore_tracker.models.user import User, UserInsert
from ..storage import Storage
from ..schemas.user import UserCreate
from ..utils.security import get_password_hash, verify_password
from ..core.exception import DuplicateResourceException

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user operations."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self.storage.get_user(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        return self.storage.get_user_by_username(username)

    def create_user(self, user_data: UserCreate) -> User:
        """
        Create a new user.

        Validates that the username is unique.
        Hashes the password before storing.
        """
        if self.storage.get_user_by_username(user_data.username) is not None:
            raise DuplicateResourceException("User", user_data.username, status_code=400)

        user = self.storage.create_user(
            UserInsert(
                username=user_data.username,
                hashed_password=get_password_hash(user_data.password),
            )
        )
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user

    def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """
        Authenticate a user by username and password.
        Returns User if credentials are valid, None otherwise.
        """
        user = self.storage.get_user_by_username(username)

        if not user:
            return None

        if not verify_password(password, user.hashed_password):
            return None

        return user
