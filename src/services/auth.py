"""Authentication service: password hashing, JWT signing and the signup/signin flow."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from jose.exceptions import JOSEError
from passlib.context import CryptContext
from pydantic import ValidationError

from src.config import Settings
from src.models.user import User
from src.schemas.auth import AccessToken, TokenClaims
from src.services.exceptions import (
    ConfigurationError,
    CredentialsIncorrectError,
    InvalidTokenError,
)
from src.services.user_service import UserStore

logger = logging.getLogger(__name__)

# Password hashing context; argon2 hashes the whole secret, with no 72-byte cutoff
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """One-way password hashing backed by a passlib context."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        """Hash a password. Empty passwords are rejected."""
        if not password:
            raise ValueError("Password must not be empty")
        return self.context.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against its stored hash."""
        if not password_hash or not password:
            return False
        try:
            return self.context.verify(password, password_hash)
        except (ValueError, TypeError):
            # Unrecognised or corrupt stored hash
            return False


class TokenSigner:
    """Issues and verifies time-bounded JWT access tokens.

    The clock is injectable so expiry can be checked against a fixed time.
    A token is accepted strictly before its ``exp`` and rejected at or after it.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(minutes=30),
        clock: Callable[[], datetime] | None = None,
    ):
        if not secret:
            raise ConfigurationError("JWT secret is not configured")
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self._clock = clock or (lambda: datetime.now(UTC))

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenSigner":
        """Build a signer from application settings."""
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.jwt_expiration_minutes),
        )

    def issue(self, user_id: int, email: str) -> str:
        """Sign a token binding the user id and email, valid for ``ttl``."""
        # NumericDate claims keep sub-second precision so the full ttl is honoured
        issued_at = self._clock()
        claims = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at.timestamp(),
            "exp": (issued_at + self.ttl).timestamp(),
        }
        try:
            return jwt.encode(claims, self.secret, algorithm=self.algorithm)
        except JOSEError as e:
            logger.error(f"Failed to sign access token with algorithm {self.algorithm}: {e}")
            raise ConfigurationError(f"Cannot sign tokens: {e}") from e

    def decode(self, token: str) -> TokenClaims:
        """Verify signature and expiry and return the token's claims."""
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError() from e

        try:
            claims = TokenClaims.model_validate(payload)
        except ValidationError as e:
            raise InvalidTokenError() from e

        if self._clock().timestamp() >= claims.exp:
            raise InvalidTokenError("Token has expired")
        return claims


class AuthService:
    """Signup and signin orchestration over explicit collaborators."""

    def __init__(self, store: UserStore, hasher: PasswordHasher, signer: TokenSigner):
        self.store = store
        self.hasher = hasher
        self.signer = signer

    def signup(self, email: str, password: str) -> AccessToken:
        """Create a user and return a token for it.

        The store's unique constraint decides duplicates, so there is no
        lookup before the insert. Raises ConflictError for a taken email.
        """
        password_hash = self.hasher.hash(password)
        user = self.store.create(email, password_hash)
        logger.info(f"Created user {user.id}")
        return self.issue_token(user.id, user.email)

    def signin(self, email: str, password: str) -> AccessToken:
        """Check credentials and return a fresh token.

        Unknown email and wrong password raise the same
        CredentialsIncorrectError.
        """
        user = self.store.find_by_email(email)
        if user is None:
            logger.warning("Signin rejected: unknown email")
            raise CredentialsIncorrectError()

        if not self.hasher.verify(user.password_hash, password):
            logger.warning(f"Signin rejected: wrong password for user {user.id}")
            raise CredentialsIncorrectError()

        return self.issue_token(user.id, user.email)

    def issue_token(self, user_id: int, email: str) -> AccessToken:
        """Sign an access token for the given identity."""
        return AccessToken(access_token=self.signer.issue(user_id, email))


def resolve_identity(token: str, signer: TokenSigner, store: UserStore) -> User:
    """Resolve a bearer token to the current user record.

    The user is re-read from the store so a token for a user that no longer
    exists is rejected. Raises InvalidTokenError on any failure.
    """
    claims = signer.decode(token)
    user = store.get(claims.sub)
    if user is None:
        logger.warning(f"Token rejected: user {claims.sub} no longer exists")
        raise InvalidTokenError("User not found")
    return user
