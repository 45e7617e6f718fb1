"""
Authentication routes.

- Login with JWT token generation
- Account registration
- Current user profile
"""

from fastapi import APIRouter, Depends, HTTPException, status, Request
import structlog

from ..database import User
from ..dependencies import get_auth_service
from ..exceptions import EmailAlreadyTakenError, InvalidCredentialsError
from ..models.requests import LoginRequest, SignupRequest
from ..models.responses import JwtResponse, MessageResponse, UserResponse
from ..services import AuthService
from ..middleware.auth import get_current_user
from ..middleware.logging import audit_logger, security_logger
from ..middleware.rate_limit import limiter, auth_rate_limit

# Configure structured logging
logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/api/v1/auth", tags=["authentication"])


@router.post("/login", response_model=JwtResponse)
@limiter.limit(auth_rate_limit)
async def login_user(
    request: Request,
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate a user and issue a bearer token.

    Unknown email and wrong password produce the same 401.
    """
    try:
        result = auth_service.login(login_data.email, login_data.password)

    except InvalidCredentialsError as e:
        audit_logger.log_authentication(
            request=request,
            auth_type="password",
            email=login_data.email,
            success=False,
            failure_reason="Invalid credentials",
        )
        security_logger.log_authentication_failure(
            request=request,
            failure_type="invalid_credentials",
            attempted_user=login_data.email,
        )
        raise e.to_http_exception()

    user = result.user

    audit_logger.log_authentication(
        request=request,
        auth_type="password",
        user_id=user.id,
        email=user.email,
        success=True,
    )

    return JwtResponse(
        token=result.token,
        expires_in=auth_service.jwt_service.expires_in,
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        admin=user.admin,
    )


@router.post("/register", response_model=MessageResponse)
@limiter.limit(auth_rate_limit)
async def register_user(
    request: Request,
    signup_data: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new, non-admin account."""
    try:
        user = auth_service.register(
            email=signup_data.email,
            password=signup_data.password,
            first_name=signup_data.first_name,
            last_name=signup_data.last_name,
        )

    except EmailAlreadyTakenError as e:
        audit_logger.log_authentication(
            request=request,
            auth_type="registration",
            email=signup_data.email,
            success=False,
            failure_reason="Email already taken",
        )
        raise e.to_http_exception()

    except Exception as e:
        logger.error("User registration failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        )

    audit_logger.log_authentication(
        request=request,
        auth_type="registration",
        user_id=user.id,
        email=user.email,
        success=True,
    )

    return MessageResponse(message="User registered successfully!")


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(current_user: User = Depends(get_current_user)):
    """Get the authenticated user's profile."""
    return UserResponse.model_validate(current_user)
