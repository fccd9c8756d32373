"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """Credentials for signup and signin."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AccessToken(BaseModel):
    """Signed bearer token returned after signup or signin."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105


class TokenClaims(BaseModel):
    """Verified claims carried by an access token."""

    sub: int
    email: str
    iat: float
    exp: float
