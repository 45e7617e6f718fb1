"""
Enrollment service.

The session-membership state machine. For every (session, user) pair the
state is either "participant" or "not a participant"; ``join`` and
``leave`` move between the two and reject every other transition with a
distinct error.

Check order for ``join`` is fixed: identifiers, then session, then user,
then membership. A missing session therefore wins over a missing user.
"""

from typing import Union

import structlog

from ..database import SessionRepository, UserRepository
from ..exceptions import (
    AlreadyParticipatingError,
    NotParticipatingError,
    SessionNotFoundError,
    UserNotFoundError,
)
from ..utils.validation import parse_identifier

logger = structlog.get_logger(__name__)


class EnrollmentService:
    """Join and leave yoga sessions."""

    def __init__(self, sessions: SessionRepository, users: UserRepository):
        self.sessions = sessions
        self.users = users

    def join(self, session_id: Union[str, int], user_id: Union[str, int]) -> None:
        """
        Enroll a user into a session.

        Raises:
            MalformedIdentifierError: Either identifier is not a valid id
            SessionNotFoundError: No such session
            UserNotFoundError: No such user
            AlreadyParticipatingError: The user is already enrolled
        """
        sid = parse_identifier(session_id, "session")
        uid = parse_identifier(user_id, "user")

        if self.sessions.find_by_id(sid) is None:
            raise SessionNotFoundError("Session not found", {"session_id": sid})

        if self.users.find_by_id(uid) is None:
            raise UserNotFoundError("User not found", {"user_id": uid})

        if self.sessions.is_participant(sid, uid):
            raise AlreadyParticipatingError(
                "User already participates in this session",
                {"session_id": sid, "user_id": uid},
            )

        if not self.sessions.add_participant(sid, uid):
            # A concurrent join committed between the check and the insert
            raise AlreadyParticipatingError(
                "User already participates in this session",
                {"session_id": sid, "user_id": uid},
            )

        logger.info("User joined session", session_id=sid, user_id=uid)

    def leave(self, session_id: Union[str, int], user_id: Union[str, int]) -> None:
        """
        Remove a user from a session.

        The user record itself is not looked up: only the membership matters.

        Raises:
            MalformedIdentifierError: Either identifier is not a valid id
            SessionNotFoundError: No such session
            NotParticipatingError: The user is not enrolled
        """
        sid = parse_identifier(session_id, "session")
        uid = parse_identifier(user_id, "user")

        if self.sessions.find_by_id(sid) is None:
            raise SessionNotFoundError("Session not found", {"session_id": sid})

        if not self.sessions.remove_participant(sid, uid):
            raise NotParticipatingError(
                "User does not participate in this session",
                {"session_id": sid, "user_id": uid},
            )

        logger.info("User left session", session_id=sid, user_id=uid)
