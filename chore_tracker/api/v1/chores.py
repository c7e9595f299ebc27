from fastapi import APIRouter, Depends, status
from typing import List

from chore_tracker.dependencies import get_current_user, get_storage
from chore_tracker.models.user import User
from chore_tracker.schemas.chore import ChoreCreate, ChoreAssignRequest, ChoreResponse
from chore_tracker.schemas.result import Result
from chore_tracker.services.chore_service import ChoreService
from chore_tracker.storage import Storage

router = APIRouter()


@router.get("", response_model=Result[List[ChoreResponse]])
async def get_household_chores(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Get all chores of the current user's household."""
    service = ChoreService(storage)
    chores = service.list_chores(current_user)
    return Result.successful(data=chores)


@router.get("/mine", response_model=Result[List[ChoreResponse]])
async def get_my_chores(
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Get chores the current user created or is assigned to."""
    service = ChoreService(storage)
    chores = service.list_my_chores(current_user)
    return Result.successful(data=chores)


@router.post("", response_model=Result[ChoreResponse], status_code=status.HTTP_201_CREATED)
async def create_chore(
    chore_data: ChoreCreate,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Create a chore in the current user's household."""
    service = ChoreService(storage)
    chore = service.create_chore(current_user, chore_data)
    return Result.successful(data=chore)


@router.patch("/{chore_id}/assign", response_model=Result[ChoreResponse])
async def assign_chore(
    chore_id: int,
    assign_data: ChoreAssignRequest,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Assign a chore to a member of the household."""
    service = ChoreService(storage)
    chore = service.assign_chore(chore_id, current_user, assign_data.user_id)
    return Result.successful(data=chore)


@router.patch("/{chore_id}/toggle", response_model=Result[ChoreResponse])
async def toggle_chore(
    chore_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Toggle a chore's completion."""
    service = ChoreService(storage)
    chore = service.toggle_chore(chore_id, current_user)
    return Result.successful(data=chore)


@router.delete("/{chore_id}", response_model=Result[dict])
async def delete_chore(
    chore_id: int,
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage)
):
    """Delete a chore from the household."""
    service = ChoreService(storage)
    service.delete_chore(chore_id, current_user)
    return Result.successful(data={"message": "Chore deleted successfully"})
