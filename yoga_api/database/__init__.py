"""
Database package: engine, models and repositories.
"""

from .config import (
    get_db,
    get_engine,
    build_engine,
    init_database,
    check_database_connection,
)

from .models import (
    User,
    Teacher,
    YogaSession,
    SessionParticipant,
)

from .user_repository import UserRepository
from .teacher_repository import TeacherRepository
from .session_repository import SessionRepository

__all__ = [
    # Configuration
    "get_db",
    "get_engine",
    "build_engine",
    "init_database",
    "check_database_connection",
    # Models
    "User",
    "Teacher",
    "YogaSession",
    "SessionParticipant",
    # Repositories
    "UserRepository",
    "TeacherRepository",
    "SessionRepository",
]
