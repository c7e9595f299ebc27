from fastapi import APIRouter, Depends, status
from typing import List

from chore_tracker.dependencies import get_current_user, get_storage
from chore_tracker.models.user import User
from chore_tracker.schemas.household import HouseholdCreate, HouseholdResponse
from chore_tracker.schemas.user import UserResponse
from chore_tracker.schemas.result import Result
from chore_tracker.services.household_service import HouseholdService
from chore_tracker.storage import Storage

router = APIRouter()


@router.post("", response_model=Result[HouseholdResponse], status_code=status.HTTP_201_CREATED)
async def create_household(
    household_data: HouseholdCreate,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Create a new household with current user as admin."""
    service = HouseholdService(storage)
    household = service.create_household(current_user, household_data)
    return Result.successful(data=household)


@router.get("/{household_id}", response_model=Result[HouseholdResponse])
async def get_household(
    household_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Get household details."""
    service = HouseholdService(storage)
    household = service.get_household(household_id, current_user)
    return Result.successful(data=household)


@router.get("/{household_id}/members", response_model=Result[List[UserResponse]])
async def get_members(
    household_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Get all household members."""
    service = HouseholdService(storage)
    members = service.get_members(household_id, current_user)
    return Result.successful(data=members)


@router.post("/{household_id}/join", response_model=Result[UserResponse])
async def join_household(
    household_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Join a household as a regular member."""
    service = HouseholdService(storage)
    user = service.join_household(household_id, current_user)
    return Result.successful(data=user)
