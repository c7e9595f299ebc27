from datetime import timedelta
from ..models.user import User
from ..services.userService import UserService
from ..schemas.user import UserCreate, Token
from ..storage import Storage
from ..utils.security import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
)
from ..config import settings
from ..core.exception import AuthenticationException


class AuthService:
    """Service layer for authentication operations."""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.user_service = UserService(storage)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.
        Returns the created user.
        """
        return self.user_service.create_user(user_data)

    def login(self, username: str, password: str) -> Token:
        """
        Login user and return access and refresh tokens.
        """
        user = self.user_service.authenticate_user(username, password)

        if not user:
            raise AuthenticationException("Incorrect username or password")

        access_token = self._create_access_token(user)
        refresh_token = create_refresh_token(data={"sub": str(user.id)})

        return Token(
            access_token=access_token, token_type="bearer", refresh_token=refresh_token
        )

    def refresh_access_token(self, refresh_token: str) -> Token:
        """
        Refresh access token using refresh token.
        Returns new access token.
        """
        payload = decode_access_token(refresh_token)

        if payload is None or payload.get("type") != "refresh":
            raise AuthenticationException("Could not validate refresh token")

        user = self._user_from_payload(payload)
        if user is None:
            raise AuthenticationException("Invalid user")

        return Token(access_token=self._create_access_token(user), token_type="bearer")

    def verify_token(self, token: str) -> User:
        """
        Verify an access token and return its user.
        Raises AuthenticationException if the token is invalid.
        """
        payload = decode_access_token(token)
        if payload is None or payload.get("type") == "refresh":
            raise AuthenticationException("Could not validate credentials")

        user = self._user_from_payload(payload)
        if user is None:
            raise AuthenticationException("User not found")

        return user

    def _user_from_payload(self, payload: dict):
        user_id_str: str | None = payload.get("sub")
        if user_id_str is None:
            raise AuthenticationException("Could not validate credentials")

        try:
            user_id = int(user_id_str)
        except (ValueError, TypeError):
            raise AuthenticationException("Invalid token format")

        return self.user_service.get_user_by_id(user_id)

    def _create_access_token(self, user: User) -> str:
        return create_access_token(
            data={"sub": str(user.id), "username": user.username},
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
