"""
API response models and schemas.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Base Response Models
class BaseResponse(BaseModel):
    """Base response model."""

    success: bool = Field(default=True, description="Whether the request was successful")
    message: Optional[str] = Field(None, description="Response message")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str = Field(..., description="Human readable outcome")


# Authentication and User Response Models


class JwtResponse(BaseModel):
    """Successful login response."""

    token: str = Field(..., description="JWT access token")
    type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    id: int = Field(..., description="Account identifier")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    admin: bool = Field(..., description="Whether the account is an administrator")


class UserResponse(BaseModel):
    """User profile response model (excludes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User's unique identifier")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    admin: bool = Field(..., description="Whether the account is an administrator")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class TeacherResponse(BaseModel):
    """Teacher response model."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Teacher identifier")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class SessionResponse(BaseModel):
    """Yoga session with its participant identifiers."""

    id: int = Field(..., description="Session identifier")
    name: str = Field(..., description="Session name")
    date: datetime = Field(..., description="Scheduled date and time")
    description: str = Field(..., description="Session description")
    teacher_id: Optional[int] = Field(None, description="Teacher leading the session")
    users: List[int] = Field(default_factory=list, description="Participant user ids")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @classmethod
    def from_session(cls, session) -> "SessionResponse":
        return cls(
            id=session.id,
            name=session.name,
            date=session.date,
            description=session.description,
            teacher_id=session.teacher_id,
            users=session.participant_ids,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )


# System Response Models


class ComponentHealth(BaseModel):
    """Health status of a single component."""

    name: str = Field(..., description="Component name")
    status: str = Field(..., description="healthy or unhealthy")


class HealthResponse(BaseResponse):
    """System health response."""

    status: str = Field(..., description="Overall system status")
    version: str = Field(..., description="Service version")
    uptime_seconds: float = Field(..., description="Service uptime in seconds")
    components: List[ComponentHealth] = Field(
        ..., description="Component health status"
    )

