from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from ...dependencies import get_current_user, get_storage
from ...models.user import User
from ...schemas.user import UserCreate, UserResponse, Token
from ...schemas.result import Result
from ...services.authService import AuthService
from ...storage import Storage

router = APIRouter()


@router.post(
    "/register",
    response_model=Result[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(user_data: UserCreate, storage: Storage = Depends(get_storage)):
    """
    Register a new user.

    - **username**: Username (unique, 3-50 chars)
    - **password**: Password (min 8 chars)

    Returns:
        Result[UserResponse]: Success result with created user data
    """
    auth_service = AuthService(storage)
    user = auth_service.register(user_data)
    return Result.successful(data=user)


@router.post("/swagger-login", response_model=Token, include_in_schema=False)
async def swagger_login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    storage: Storage = Depends(get_storage),
):
    """Bare token response for the interactive docs' Authorize button."""
    token = AuthService(storage).login(form_data.username, form_data.password)
    return Token(access_token=token.access_token, token_type=token.token_type)


@router.post("/login", response_model=Result[Token])
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    storage: Storage = Depends(get_storage),
):
    """
    Login with username and password.

    Returns:
        Result[Token]: Success result with access and refresh tokens
    """
    auth_service = AuthService(storage)
    token = auth_service.login(form_data.username, form_data.password)
    return Result.successful(data=token)


@router.get("/me", response_model=Result[UserResponse])
async def get_current_user_profile(current_user: User = Depends(get_current_user)):
    """Get current authenticated user's profile."""
    return Result.successful(data=current_user)


@router.post("/refresh", response_model=Result[Token])
async def refresh_token(refresh_token: str, storage: Storage = Depends(get_storage)):
    """
    Refresh access token using refresh token.

    Returns:
        Result[Token]: Success result with new access token
    """
    auth_service = AuthService(storage)
    new_token = auth_service.refresh_access_token(refresh_token)
    return Result.successful(data=new_token)


@router.post("/logout", response_model=Result[dict])
async def logout(current_user: User = Depends(get_current_user)):
    """
    Logout user.

    Tokens are stateless; the client should discard them.
    """
    return Result.successful(data={"message": "Successfully logged out"})
