"""Service layer for owner-scoped bookmark CRUD."""

import logging

from sqlalchemy.orm import Session

from src.models.bookmark import Bookmark
from src.schemas.bookmark import BookmarkCreate, BookmarkUpdate
from src.services.exceptions import BookmarkNotFoundError

logger = logging.getLogger(__name__)


class BookmarkService:
    """Bookmark operations; every query is filtered by the owning user."""

    def __init__(self, db: Session):
        self.db = db

    def list_bookmarks(self, user_id: int) -> list[Bookmark]:
        """Get all bookmarks owned by a user, newest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
            .all()
        )

    def get_bookmark(self, user_id: int, bookmark_id: int) -> Bookmark:
        """Get one of the user's bookmarks.

        A bookmark owned by someone else is reported as not found.
        """
        bookmark = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
            .first()
        )
        if bookmark is None:
            raise BookmarkNotFoundError(bookmark_id)
        return bookmark

    def create_bookmark(self, user_id: int, data: BookmarkCreate) -> Bookmark:
        bookmark = Bookmark(
            user_id=user_id,
            title=data.title,
            description=data.description,
            link=data.link,
        )
        self.db.add(bookmark)
        self.db.commit()
        self.db.refresh(bookmark)
        logger.info(f"Created bookmark {bookmark.id} for user {user_id}")
        return bookmark

    def update_bookmark(self, user_id: int, bookmark_id: int, data: BookmarkUpdate) -> Bookmark:
        bookmark = self.get_bookmark(user_id, bookmark_id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            # title and link are required columns
            if value is None and field in ("title", "link"):
                continue
            setattr(bookmark, field, value)

        self.db.commit()
        self.db.refresh(bookmark)
        return bookmark

    def delete_bookmark(self, user_id: int, bookmark_id: int) -> None:
        bookmark = self.get_bookmark(user_id, bookmark_id)
        self.db.delete(bookmark)
        self.db.commit()
        logger.info(f"Deleted bookmark {bookmark_id} for user {user_id}")
