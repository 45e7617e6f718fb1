"""
API request models and schemas.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, EmailStr, field_validator


# Authentication Models


class LoginRequest(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


class SignupRequest(BaseModel):
    """Request model for account registration."""

    email: EmailStr = Field(..., description="Valid email address")
    password: str = Field(..., min_length=6, max_length=40, description="Password")
    first_name: str = Field(
        ..., min_length=3, max_length=20, description="User's first name"
    )
    last_name: str = Field(
        ..., min_length=3, max_length=20, description="User's last name"
    )

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v):
        """Emails are stored in a 50 character column."""
        if len(v) > 50:
            raise ValueError("Email must be at most 50 characters")
        return v

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, v):
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v


# Session Management Models


class SessionRequest(BaseModel):
    """Create or replace a yoga session."""

    name: str = Field(..., min_length=1, max_length=50, description="Session name")
    date: datetime = Field(..., description="Scheduled date and time")
    description: str = Field(
        ..., min_length=1, max_length=2500, description="Session description"
    )
    teacher_id: Optional[int] = Field(
        None, gt=0, le=2**63 - 1, description="Teacher leading the session"
    )

    @field_validator("date")
    @classmethod
    def validate_date(cls, v):
        """Dates without an offset are taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
