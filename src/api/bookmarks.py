"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_bookmark_service, get_current_user
from src.models.user import User
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.bookmark_service import BookmarkService
from src.services.exceptions import BookmarkNotFoundError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found")


@router.get("", response_model=list[BookmarkResponse])
async def get_bookmarks(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks of the current user."""
    return service.list_bookmarks(current_user.id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    bookmark_data: BookmarkCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark."""
    return service.create_bookmark(current_user.id, bookmark_data)


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a specific bookmark."""
    try:
        return service.get_bookmark(current_user.id, bookmark_id)
    except BookmarkNotFoundError as e:
        raise _not_found() from e


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_id: int,
    bookmark_data: BookmarkUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark."""
    try:
        return service.update_bookmark(current_user.id, bookmark_id, bookmark_data)
    except BookmarkNotFoundError as e:
        raise _not_found() from e


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    bookmark_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark."""
    try:
        service.delete_bookmark(current_user.id, bookmark_id)
    except BookmarkNotFoundError as e:
        raise _not_found() from e
