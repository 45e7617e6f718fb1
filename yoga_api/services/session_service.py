"""
Yoga session management service.

Create, read, update and delete sessions. Membership is not touched here:
the participant roster is owned by the enrollment service, and an update
leaves it exactly as it was.
"""

from datetime import datetime, timezone
from typing import List, Union

import structlog

from ..database import SessionRepository, TeacherRepository, YogaSession
from ..exceptions import SessionNotFoundError, TeacherNotFoundError
from ..models.requests import SessionRequest
from ..utils.validation import parse_identifier

logger = structlog.get_logger(__name__)


class SessionService:
    """Service class for yoga session lifecycle operations."""

    def __init__(self, sessions: SessionRepository, teachers: TeacherRepository):
        self.sessions = sessions
        self.teachers = teachers

    def find_all(self) -> List[YogaSession]:
        return self.sessions.find_all()

    def get_by_id(self, session_id: Union[str, int]) -> YogaSession:
        """
        Retrieve a session by id.

        Raises:
            MalformedIdentifierError: Invalid id
            SessionNotFoundError: No such session
        """
        sid = parse_identifier(session_id, "session")
        session = self.sessions.find_by_id(sid)
        if session is None:
            raise SessionNotFoundError("Session not found", {"session_id": sid})
        return session

    def create(self, data: SessionRequest) -> YogaSession:
        """
        Create a session with an empty roster.

        Raises:
            TeacherNotFoundError: teacher_id references no teacher
        """
        self._check_teacher(data.teacher_id)

        session = YogaSession(
            name=data.name,
            date=data.date,
            description=data.description,
            teacher_id=data.teacher_id,
        )
        session = self.sessions.save(session)

        logger.info("Session created", session_id=session.id, name=session.name)
        return session

    def update(self, session_id: Union[str, int], data: SessionRequest) -> YogaSession:
        """
        Replace the descriptive fields of a session.

        Raises:
            MalformedIdentifierError: Invalid id
            SessionNotFoundError: No such session
            TeacherNotFoundError: teacher_id references no teacher
        """
        session = self.get_by_id(session_id)
        self._check_teacher(data.teacher_id)

        session.name = data.name
        session.date = data.date
        session.description = data.description
        session.teacher_id = data.teacher_id
        session.updated_at = datetime.now(timezone.utc)

        session = self.sessions.save(session)

        logger.info("Session updated", session_id=session.id)
        return session

    def delete(self, session_id: Union[str, int]) -> None:
        """
        Delete a session and its roster.

        Raises:
            MalformedIdentifierError: Invalid id
            SessionNotFoundError: No such session
        """
        sid = self.get_by_id(session_id).id
        self.sessions.delete_by_id(sid)

        logger.info("Session deleted", session_id=sid)

    def _check_teacher(self, teacher_id) -> None:
        if teacher_id is not None and self.teachers.find_by_id(teacher_id) is None:
            raise TeacherNotFoundError("Teacher not found", {"teacher_id": teacher_id})
