"""
Services package.

This package contains the business logic of the API:
- JWTService: JWT token issuance and verification
- PasswordHasher: bcrypt hashing and verification
- AuthService: Login and registration
- EnrollmentService: Joining and leaving sessions
- SessionService: Session lifecycle
- TeacherService / UserService: Lookups and account deletion
"""

from .jwt_service import JWTService
from .password_service import PasswordHasher
from .auth_service import AuthService, LoginResult
from .enrollment_service import EnrollmentService
from .session_service import SessionService
from .teacher_service import TeacherService
from .user_service import UserService

__all__ = [
    "JWTService",
    "PasswordHasher",
    "AuthService",
    "LoginResult",
    "EnrollmentService",
    "SessionService",
    "TeacherService",
    "UserService",
]
