"""
Tests for the session lifecycle service.
"""

from datetime import datetime, timedelta, timezone

import pytest

from yoga_api.database import SessionRepository, TeacherRepository, UserRepository
from yoga_api.exceptions import (
    MalformedIdentifierError,
    SessionNotFoundError,
    TeacherNotFoundError,
)
from yoga_api.models.requests import SessionRequest
from yoga_api.services import EnrollmentService, SessionService


@pytest.fixture
def session_service(db) -> SessionService:
    return SessionService(SessionRepository(db), TeacherRepository(db))


def request_for(teacher_id=None, name="Lunch hatha"):
    return SessionRequest(
        name=name,
        date=datetime(2026, 11, 3, 12, 15),
        description="Forty five minutes",
        teacher_id=teacher_id,
    )


class TestSessionService:
    def test_create_without_teacher(self, session_service):
        session = session_service.create(request_for())

        assert session.id is not None
        assert session.teacher_id is None
        assert session.participant_ids == []

    def test_create_with_unknown_teacher(self, session_service):
        with pytest.raises(TeacherNotFoundError):
            session_service.create(request_for(teacher_id=999))

    def test_find_all_in_id_order(self, session_service, teacher):
        first = session_service.create(request_for(teacher.id, "First"))
        second = session_service.create(request_for(teacher.id, "Second"))

        assert [s.id for s in session_service.find_all()] == [first.id, second.id]

    def test_update_leaves_roster_alone(self, session_service, db, yoga_session, registered_user):
        EnrollmentService(SessionRepository(db), UserRepository(db)).join(
            yoga_session.id, registered_user.id
        )

        updated = session_service.update(str(yoga_session.id), request_for(name="Renamed"))

        assert updated.name == "Renamed"
        assert updated.teacher_id is None
        assert updated.participant_ids == [registered_user.id]

    def test_get_unknown(self, session_service):
        with pytest.raises(SessionNotFoundError):
            session_service.get_by_id("999")

    def test_get_malformed(self, session_service):
        with pytest.raises(MalformedIdentifierError):
            session_service.get_by_id("one")

    def test_delete(self, session_service, yoga_session):
        session_id = yoga_session.id

        session_service.delete(session_id)

        with pytest.raises(SessionNotFoundError):
            session_service.get_by_id(session_id)

    def test_delete_unknown(self, session_service):
        with pytest.raises(SessionNotFoundError):
            session_service.delete(999)


class TestSessionRequestDate:
    def test_naive_date_is_taken_as_utc(self):
        request = request_for()

        assert request.date.tzinfo == timezone.utc
        assert request.date == datetime(2026, 11, 3, 12, 15, tzinfo=timezone.utc)

    def test_offset_is_kept(self):
        paris = timezone(timedelta(hours=1))
        request = SessionRequest(
            name="Sunrise flow",
            date=datetime(2026, 11, 3, 7, 0, tzinfo=paris),
            description="Sun salutations",
        )

        assert request.date.utcoffset() == timedelta(hours=1)
