"""Exceptions raised by the service layer.

Routers translate these into HTTP responses; services never raise
``HTTPException`` themselves.
"""


class ConflictError(Exception):
    """Raised when an email is already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Credentials taken")


class UnauthorizedError(Exception):
    """Base class for failures to establish the caller's identity."""


class CredentialsIncorrectError(UnauthorizedError):
    """Raised on signin with an unknown email or a wrong password.

    Both cases share one message so the response does not reveal whether
    an account exists.
    """

    def __init__(self) -> None:
        super().__init__("Credentials Incorrect")


class InvalidTokenError(UnauthorizedError):
    """Raised when a bearer token is malformed, tampered with or expired."""

    def __init__(self, reason: str = "Invalid authentication credentials") -> None:
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(Exception):
    """Raised when tokens cannot be signed or verified due to server configuration."""


class BookmarkNotFoundError(Exception):
    """Raised when a bookmark does not exist or belongs to another user."""

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark not found: {bookmark_id}")
