"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import AccessToken, AuthRequest
from src.services.auth import AuthService
from src.services.exceptions import ConflictError, CredentialsIncorrectError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccessToken, status_code=status.HTTP_201_CREATED)
async def signup(
    credentials: AuthRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user and return an access token."""
    try:
        return auth_service.signup(credentials.email, credentials.password)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.post("/signin", response_model=AccessToken)
async def signin(
    credentials: AuthRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    try:
        return auth_service.signin(credentials.email, credentials.password)
    except CredentialsIncorrectError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
