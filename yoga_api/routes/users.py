"""
User account routes.
"""

from fastapi import APIRouter, Depends, Request
import structlog

from ..database import User
from ..dependencies import get_user_service
from ..exceptions import NotAccountOwnerError, YogaApiError
from ..models.responses import MessageResponse, UserResponse
from ..services import UserService
from ..middleware.auth import get_current_user
from ..middleware.logging import audit_logger, security_logger

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    """Get a user's public profile."""
    try:
        user = user_service.get_by_id(user_id)
    except YogaApiError as e:
        raise e.to_http_exception()

    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    request: Request,
    user_id: str,
    user_service: UserService = Depends(get_user_service),
    current_user: User = Depends(get_current_user),
):
    """
    Delete an account.

    Only the account holder may delete it; memberships go with it.
    """
    requester_id = current_user.id

    try:
        user_service.delete(user_id, requested_by=current_user)

    except NotAccountOwnerError as e:
        security_logger.log_suspicious_activity(
            request,
            activity_type="foreign_account_deletion",
            details={"target_user_id": user_id, "requested_by": requester_id},
        )
        raise e.to_http_exception()

    except YogaApiError as e:
        raise e.to_http_exception()

    audit_logger.log_user_action(request, "account_deleted", requester_id)
    return MessageResponse(message="User deleted")
