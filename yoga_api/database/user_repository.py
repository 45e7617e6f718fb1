"""
User repository.

Data access for user accounts. Email lookups are exact matches: addresses
are stored and compared case-sensitively.
"""

from typing import Optional

from sqlalchemy import delete
from sqlmodel import Session, select
import structlog

from .models import User, SessionParticipant

logger = structlog.get_logger(__name__)


class UserRepository:
    """Repository for user account database operations."""

    def __init__(self, db: Session):
        """
        Initialize the repository with a database session.

        Args:
            db: SQLModel database session
        """
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the account registered with this exact email, if any."""
        return self.db.exec(select(User).where(User.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def save(self, user: User) -> User:
        """
        Insert or update a user and return the refreshed row.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already stored
        """
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except Exception:
            self.db.rollback()
            raise

        logger.debug("User saved", user_id=user.id)
        return user

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user together with their session memberships."""
        try:
            self.db.execute(
                delete(SessionParticipant).where(SessionParticipant.user_id == user_id)
            )
            self.db.execute(delete(User).where(User.id == user_id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.debug("User deleted", user_id=user_id)
