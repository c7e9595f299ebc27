from fastapi import APIRouter, Depends

from ...dependencies import get_current_user, get_storage
from ...models.user import User
from ...schemas.user import UserResponse
from ...schemas.result import Result
from ...services.userService import UserService
from ...storage import Storage
from ...core.exception import ResourceNotFoundException

router = APIRouter()


@router.get("/{user_id}", response_model=Result[UserResponse])
async def get_user_by_id(
    user_id: int,
    storage: Storage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """
    Get user by ID.

    Users can only view themselves and members of their own household.
    """
    user = UserService(storage).get_user_by_id(user_id)

    if not user:
        raise ResourceNotFoundException("User", user_id)

    if user.id != current_user.id and (
        not current_user.household_id or user.household_id != current_user.household_id
    ):
        raise ResourceNotFoundException("User", user_id)

    return Result.successful(data=user)
