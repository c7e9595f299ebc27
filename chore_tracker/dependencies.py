from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from .storage import Storage
from .models.user import User
from .services.authService import AuthService
from .config import settings

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_storage(request: Request) -> Storage:
    """
    Storage dependency for FastAPI.
    Returns the storage instance the application was created with.
    """
    return request.app.state.storage


async def get_current_user(
    token: str = Depends(oauth2_scheme), storage: Storage = Depends(get_storage)
) -> User:
    """
    Dependency to get current authenticated user.

    The user is re-read from storage on every request, so household
    membership is always current.

    Example:
        @router.get("/protected")
        async def protected_route(current_user: User = Depends(get_current_user)):
            return {"user_id": current_user.id}
    """
    return AuthService(storage).verify_token(token)
