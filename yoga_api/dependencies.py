"""
FastAPI dependency providers.

Stateless collaborators built once at startup live on ``app.state``; the
services are assembled per request around the request's database session.
"""

from fastapi import Depends, Request
from sqlmodel import Session

from .database import (
    get_db,
    SessionRepository,
    TeacherRepository,
    UserRepository,
)
from .services import (
    AuthService,
    EnrollmentService,
    JWTService,
    PasswordHasher,
    SessionService,
    TeacherService,
    UserService,
)


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_auth_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> AuthService:
    return AuthService(UserRepository(db), password_hasher, jwt_service)


def get_enrollment_service(db: Session = Depends(get_db)) -> EnrollmentService:
    return EnrollmentService(SessionRepository(db), UserRepository(db))


def get_session_service(db: Session = Depends(get_db)) -> SessionService:
    return SessionService(SessionRepository(db), TeacherRepository(db))


def get_teacher_service(db: Session = Depends(get_db)) -> TeacherService:
    return TeacherService(TeacherRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
