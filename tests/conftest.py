import os
import pytest
from fastapi.testclient import TestClient

# Set required environment variables for testing
os.environ["API_V1_STR"] = "/api"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-0123456789"

from chore_tracker.main import app
from chore_tracker.dependencies import get_storage
from chore_tracker.models.household import HouseholdInsert
from chore_tracker.models.user import UserInsert
from chore_tracker.storage import MemStorage
from chore_tracker.utils.security import get_password_hash

TEST_PASSWORD = "testpass123"


@pytest.fixture
def storage():
    """
    Fresh, empty storage for each test.
    The app's storage dependency is pointed at it for the duration of the test.
    """
    storage = MemStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    yield storage
    app.dependency_overrides.clear()


@pytest.fixture
def client(storage):
    """Create a FastAPI TestClient bound to the test storage."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(storage):
    """Factory creating users with the shared test password."""
    def _make_user(username: str):
        return storage.create_user(
            UserInsert(username=username, hashed_password=get_password_hash(TEST_PASSWORD))
        )
    return _make_user


@pytest.fixture
def test_user(make_user):
    """Create a test user for authentication tests."""
    return make_user("testuser")


@pytest.fixture
def household(storage, test_user):
    """A household with test_user as its admin."""
    household = storage.create_household(
        HouseholdInsert(name="Test Home", created_by_id=test_user.id)
    )
    storage.add_user_to_household(test_user.id, household.id, is_admin=True)
    return household


@pytest.fixture
def login(client):
    """Factory returning bearer headers for a username."""
    def _login(username: str, password: str = TEST_PASSWORD):
        response = client.post(
            "/api/auth/login",
            data={"username": username, "password": password}
        )
        token = response.json()["data"]["access_token"]
        return {"Authorization": f"Bearer {token}"}
    return _login


@pytest.fixture
def auth_headers(login, test_user):
    """Get authorization headers with bearer token for test_user."""
    return login(test_user.username)
