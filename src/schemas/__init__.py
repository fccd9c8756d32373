"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AccessToken, AuthRequest, TokenClaims
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthRequest",
    "AccessToken",
    "TokenClaims",
    "UserUpdate",
    "UserResponse",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
]
