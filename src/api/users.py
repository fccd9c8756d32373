"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_current_user, get_user_store
from src.models.user import User
from src.schemas.user import UserResponse, UserUpdate
from src.services.exceptions import ConflictError
from src.services.user_service import UserStore

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.patch("", response_model=UserResponse)
async def edit_user(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    store: Annotated[UserStore, Depends(get_user_store)],
):
    """Edit the current user's profile."""
    try:
        return store.update_profile(current_user, user_data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
