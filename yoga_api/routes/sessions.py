"""
Yoga session routes.

CRUD on sessions plus the participate endpoints that join and leave them.
Path identifiers are taken as strings and parsed by the services, so a
malformed id is a 400 and an unknown one a 404.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status
import structlog

from ..database import User
from ..dependencies import get_enrollment_service, get_session_service
from ..exceptions import YogaApiError
from ..models.requests import SessionRequest
from ..models.responses import MessageResponse, SessionResponse
from ..services import EnrollmentService, SessionService
from ..middleware.auth import get_current_user
from ..middleware.logging import audit_logger

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.get("", response_model=List[SessionResponse])
async def list_sessions(
    session_service: SessionService = Depends(get_session_service),
    current_user: User = Depends(get_current_user),
):
    """List all sessions."""
    return [SessionResponse.from_session(s) for s in session_service.find_all()]


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
    current_user: User = Depends(get_current_user),
):
    """Get a session by id."""
    try:
        session = session_service.get_by_id(session_id)
    except YogaApiError as e:
        raise e.to_http_exception()

    return SessionResponse.from_session(session)


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: Request,
    session_data: SessionRequest,
    session_service: SessionService = Depends(get_session_service),
    current_user: User = Depends(get_current_user),
):
    """Create a session with no participants."""
    try:
        session = session_service.create(session_data)
    except YogaApiError as e:
        raise e.to_http_exception()

    audit_logger.log_user_action(
        request, "session_created", current_user.id, {"session_id": session.id}
    )
    return SessionResponse.from_session(session)


@router.put("/{session_id}", response_model=SessionResponse)
async def update_session(
    request: Request,
    session_id: str,
    session_data: SessionRequest,
    session_service: SessionService = Depends(get_session_service),
    current_user: User = Depends(get_current_user),
):
    """Replace a session's name, date, description and teacher."""
    try:
        session = session_service.update(session_id, session_data)
    except YogaApiError as e:
        raise e.to_http_exception()

    audit_logger.log_user_action(
        request, "session_updated", current_user.id, {"session_id": session.id}
    )
    return SessionResponse.from_session(session)


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    request: Request,
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
    current_user: User = Depends(get_current_user),
):
    """Delete a session and its roster."""
    try:
        session_service.delete(session_id)
    except YogaApiError as e:
        raise e.to_http_exception()

    audit_logger.log_user_action(
        request, "session_deleted", current_user.id, {"session_id": session_id}
    )
    return MessageResponse(message="Session deleted")


@router.post("/{session_id}/participate/{user_id}", response_model=MessageResponse)
async def participate(
    request: Request,
    session_id: str,
    user_id: str,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
    current_user: User = Depends(get_current_user),
):
    """Enroll a user into a session."""
    try:
        enrollment_service.join(session_id, user_id)
    except YogaApiError as e:
        logger.info(
            "Join rejected",
            session_id=session_id,
            user_id=user_id,
            error_code=e.error_code,
        )
        raise e.to_http_exception()

    audit_logger.log_enrollment(
        request, "join", session_id, user_id, requested_by=current_user.id
    )
    return MessageResponse(message="User joined session")


@router.delete("/{session_id}/participate/{user_id}", response_model=MessageResponse)
async def no_longer_participate(
    request: Request,
    session_id: str,
    user_id: str,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
    current_user: User = Depends(get_current_user),
):
    """Remove a user from a session."""
    try:
        enrollment_service.leave(session_id, user_id)
    except YogaApiError as e:
        logger.info(
            "Leave rejected",
            session_id=session_id,
            user_id=user_id,
            error_code=e.error_code,
        )
        raise e.to_http_exception()

    audit_logger.log_enrollment(
        request, "leave", session_id, user_id, requested_by=current_user.id
    )
    return MessageResponse(message="User left session")
