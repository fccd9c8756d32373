"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.models.user import User
from src.services.auth import AuthService, PasswordHasher, TokenSigner, resolve_identity
from src.services.bookmark_service import BookmarkService
from src.services.exceptions import UnauthorizedError
from src.services.user_service import UserStore

# Missing credentials are reported as 401 below rather than by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_token_signer(settings: Annotated[Settings, Depends(get_settings)]) -> TokenSigner:
    """Get a token signer configured from settings."""
    return TokenSigner.from_settings(settings)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Get the user store bound to the request session."""
    return UserStore(db)


def get_auth_service(
    store: Annotated[UserStore, Depends(get_user_store)],
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(store, PasswordHasher(), signer)


def get_bookmark_service(db: Annotated[Session, Depends(get_db)]) -> BookmarkService:
    """Get bookmark service with dependencies."""
    return BookmarkService(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    signer: Annotated[TokenSigner, Depends(get_token_signer)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return resolve_identity(credentials.credentials, signer, store)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
