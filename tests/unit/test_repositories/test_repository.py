import pytest
from pydantic import ValidationError

from chore_tracker.repositories.chore_repository import ChoreRepository
from chore_tracker.repositories.userRepository import UserRepository


@pytest.mark.unit
class TestBaseRepository:
    """Unit tests for the in-memory table behaviour shared by all repositories."""

    def test_create_from_dict_assigns_sequential_ids(self):
        repo = UserRepository()

        first = repo.create_from_dict({"username": "a", "hashed_password": "x"})
        second = repo.create_from_dict({"username": "b", "hashed_password": "x"})

        assert (first.id, second.id) == (1, 2)
        assert repo.count() == 2

    def test_create_from_dict_ignores_supplied_id(self):
        repo = UserRepository()

        user = repo.create_from_dict({"id": 50, "username": "a", "hashed_password": "x"})

        assert user.id == 1

    def test_update_missing_returns_none(self):
        assert UserRepository().update(3, {"username": "x"}) is None

    def test_update_validates_values(self):
        repo = ChoreRepository()
        chore = repo.create_from_dict(
            {"name": "Dishes", "reward": 5, "household_id": 1, "user_id": 1}
        )

        with pytest.raises(ValidationError):
            repo.update(chore.id, {"reward": "lots"})

        assert repo.get(chore.id) == chore

    def test_delete_reports_whether_removed(self):
        repo = UserRepository()
        user = repo.create_from_dict({"username": "a", "hashed_password": "x"})

        assert repo.delete(user.id) is True
        assert repo.delete(user.id) is False
        assert repo.exists(user.id) is False

    def test_get_by_username_returns_earliest(self):
        repo = UserRepository()
        first = repo.create_from_dict({"username": "sam", "hashed_password": "x"})
        repo.create_from_dict({"username": "sam", "hashed_password": "y"})

        assert repo.get_by_username("sam") == first
        assert repo.username_exists("sam") is True
        assert repo.username_exists("kim") is False
