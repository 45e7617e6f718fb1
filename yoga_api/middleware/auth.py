"""
Authentication dependency for JWT bearer tokens.

Protected routes depend on ``get_current_user``; every failure (missing
header, bad signature, expired token, unknown account) is reported as the
same 401 with a ``WWW-Authenticate: Bearer`` challenge.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session
import structlog

from ..database import get_db, User, UserRepository
from ..dependencies import get_jwt_service
from ..exceptions import ExpiredTokenError, MalformedIdentifierError, TokenValidationError
from ..services import JWTService
from ..utils.validation import parse_identifier
from .logging import security_logger

# Configure structured logging
logger = structlog.get_logger(__name__)

# Missing credentials are turned into a 401 below rather than by the scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Extract and validate the bearer token to get the current user.

    Args:
        request: Incoming request, used for security logging
        credentials: HTTP Bearer token credentials
        db: Database session
        jwt_service: Token verifier configured at startup

    Returns:
        User: The authenticated user

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired,
            or if its subject no longer exists
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        subject = jwt_service.verify(credentials.credentials)
        user_id = parse_identifier(subject, "user")

    except ExpiredTokenError as e:
        logger.info("Expired token presented", error=str(e))
        raise _unauthorized("Token has expired")

    except TokenValidationError as e:
        security_logger.log_authentication_failure(request, failure_type="invalid_token")
        logger.warning("Token validation failed", error=str(e))
        raise _unauthorized()

    except MalformedIdentifierError as e:
        logger.warning("Token subject is not a user id", error=str(e))
        raise _unauthorized()

    user = UserRepository(db).find_by_id(user_id)
    if user is None:
        logger.warning("User not found for valid token", user_id=user_id)
        raise _unauthorized()

    request.state.user_id = user.id
    return user
