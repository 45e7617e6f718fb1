"""
Request and response schemas.
"""

from .requests import LoginRequest, SignupRequest, SessionRequest
from .responses import (
    BaseResponse,
    MessageResponse,
    JwtResponse,
    UserResponse,
    TeacherResponse,
    SessionResponse,
    ComponentHealth,
    HealthResponse,
)

__all__ = [
    "LoginRequest",
    "SignupRequest",
    "SessionRequest",
    "BaseResponse",
    "MessageResponse",
    "JwtResponse",
    "UserResponse",
    "TeacherResponse",
    "SessionResponse",
    "ComponentHealth",
    "HealthResponse",
]
