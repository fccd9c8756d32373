"""User persistence: credential lookups and profile edits."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.user import UserUpdate
from src.services.exceptions import ConflictError

logger = logging.getLogger(__name__)

# Profile fields a user may edit; the password hash is never among them
EDITABLE_FIELDS = ("email", "first_name", "last_name")


class UserStore:
    """Credential store over the users table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password_hash: str) -> User:
        """Insert a user. Raises ConflictError if the email is already registered."""
        user = User(email=email, password_hash=password_hash)
        self.db.add(user)
        self._commit_or_conflict(email)
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email (exact, case-sensitive match)."""
        return self.db.query(User).filter(User.email == email).first()

    def get(self, user_id: int) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def update_profile(self, user: User, data: UserUpdate) -> User:
        """Apply the provided profile fields to a user.

        Raises ConflictError if the new email belongs to another user.
        """
        update_data = data.model_dump(exclude_unset=True)
        for field in EDITABLE_FIELDS:
            if field in update_data:
                if field == "email" and update_data[field] is None:
                    continue
                setattr(user, field, update_data[field])

        self._commit_or_conflict(user.email)
        self.db.refresh(user)
        logger.info(f"Updated profile for user {user.id}: {sorted(update_data)}")
        return user

    def _commit_or_conflict(self, email: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Rejected duplicate email")
            raise ConflictError(email) from e
