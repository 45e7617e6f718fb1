"""
Yoga session repository.

Besides plain CRUD, this repository owns the membership table. Joining and
leaving are single conditional statements against ``participate`` rather
than "load the roster, edit it in memory, save the aggregate", so two
concurrent requests on the same session cannot overwrite each other's
change.
"""

from typing import List, Optional

from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
import structlog

from .models import YogaSession, SessionParticipant

logger = structlog.get_logger(__name__)


class SessionRepository:
    """Repository for yoga session database operations."""

    def __init__(self, db: Session):
        """
        Initialize the repository with a database session.

        Args:
            db: SQLModel database session
        """
        self.db = db

    def find_by_id(self, session_id: int) -> Optional[YogaSession]:
        return self.db.get(YogaSession, session_id)

    def find_all(self) -> List[YogaSession]:
        return list(self.db.exec(select(YogaSession).order_by(YogaSession.id)).all())

    def save(self, session: YogaSession) -> YogaSession:
        """Insert or update a session and return the refreshed row."""
        try:
            self.db.add(session)
            self.db.commit()
            self.db.refresh(session)
        except Exception:
            self.db.rollback()
            raise

        logger.debug("Session saved", session_id=session.id)
        return session

    def delete_by_id(self, session_id: int) -> None:
        """Delete a session together with its membership rows."""
        try:
            self.db.execute(
                delete(SessionParticipant).where(
                    SessionParticipant.session_id == session_id
                )
            )
            self.db.execute(delete(YogaSession).where(YogaSession.id == session_id))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.debug("Session deleted", session_id=session_id)

    # Membership

    def is_participant(self, session_id: int, user_id: int) -> bool:
        statement = select(SessionParticipant.user_id).where(
            SessionParticipant.session_id == session_id,
            SessionParticipant.user_id == user_id,
        )
        return self.db.exec(statement).first() is not None

    def add_participant(self, session_id: int, user_id: int) -> bool:
        """
        Insert a membership row.

        Returns:
            bool: False if the row already existed (composite key violation)
        """
        try:
            self.db.execute(
                insert(SessionParticipant).values(
                    session_id=session_id, user_id=user_id
                )
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info(
                "Membership insert rejected by store",
                session_id=session_id,
                user_id=user_id,
            )
            return False
        except Exception:
            self.db.rollback()
            raise

        return True

    def remove_participant(self, session_id: int, user_id: int) -> bool:
        """
        Delete a membership row.

        Returns:
            bool: False if there was no row to delete
        """
        try:
            result = self.db.execute(
                delete(SessionParticipant).where(
                    SessionParticipant.session_id == session_id,
                    SessionParticipant.user_id == user_id,
                )
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        return result.rowcount > 0
