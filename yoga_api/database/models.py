"""
SQLModel database models for accounts, teachers and yoga sessions.
"""

from datetime import datetime, timezone
from typing import Optional, List

from sqlmodel import SQLModel, Field, Relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionParticipant(SQLModel, table=True):
    """Link table for the YogaSession-User many-to-many relationship."""

    __tablename__ = "participate"

    session_id: Optional[int] = Field(
        default=None, foreign_key="sessions.id", primary_key=True
    )
    user_id: Optional[int] = Field(
        default=None, foreign_key="users.id", primary_key=True
    )


class User(SQLModel, table=True):
    """User account model for authentication."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)

    email: str = Field(max_length=50, unique=True, index=True)
    first_name: str = Field(max_length=20)
    last_name: str = Field(max_length=20)
    password: str = Field(max_length=120)
    admin: bool = Field(default=False)

    created_at: Optional[datetime] = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = Field(default_factory=_utcnow)

    sessions: List["YogaSession"] = Relationship(
        back_populates="participants", link_model=SessionParticipant
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, admin={self.admin})>"


class Teacher(SQLModel, table=True):
    """Teacher leading yoga sessions."""

    __tablename__ = "teachers"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=20)
    last_name: str = Field(max_length=20)

    created_at: Optional[datetime] = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = Field(default_factory=_utcnow)

    sessions: List["YogaSession"] = Relationship(back_populates="teacher")

    def __repr__(self):
        return f"<Teacher(id={self.id}, name={self.first_name} {self.last_name})>"


class YogaSession(SQLModel, table=True):
    """Scheduled yoga session with its participant roster."""

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    date: datetime
    description: str = Field(max_length=2500)
    teacher_id: Optional[int] = Field(
        default=None, foreign_key="teachers.id", index=True
    )

    created_at: Optional[datetime] = Field(default_factory=_utcnow)
    updated_at: Optional[datetime] = Field(default_factory=_utcnow)

    teacher: Optional[Teacher] = Relationship(back_populates="sessions")
    participants: List[User] = Relationship(
        back_populates="sessions", link_model=SessionParticipant
    )

    def __repr__(self):
        return f"<YogaSession(id={self.id}, name={self.name}, date={self.date})>"

    @property
    def participant_ids(self) -> List[int]:
        """Identifiers of enrolled users, in ascending order."""
        return sorted(user.id for user in self.participants)
