"""
Custom exception classes for the Yoga API.

This module defines the exception hierarchy raised by services and
repositories. Each class carries the HTTP status it maps to so the
route layer and the global exception handler render them consistently.
"""

import re
from typing import Optional, Any, Dict

from fastapi import HTTPException, status


class DomainHTTPException(HTTPException):
    """HTTPException that keeps the symbolic code and details of a domain error."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code
        self.details = details or {}


class YogaApiError(Exception):
    """
    Base exception for all Yoga API domain errors.

    All custom exceptions in this package should inherit from this class.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message

    @property
    def error_code(self) -> str:
        """Upper snake case name of the error class, e.g. SESSION_NOT_FOUND."""
        name = re.sub(r"Error$", "", type(self).__name__)
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()

    def to_http_exception(self, headers: Optional[Dict[str, str]] = None) -> HTTPException:
        return DomainHTTPException(
            status_code=self.status_code,
            detail=self.message,
            error_code=self.error_code,
            details=self.details,
            headers=headers,
        )


class ConfigurationError(YogaApiError):
    """
    Raised when the application configuration is unusable.

    Examples:
    - Placeholder JWT secret in use
    - Unknown signing algorithm
    """

    pass


class MalformedIdentifierError(YogaApiError):
    """Raised when an identifier cannot be parsed as a record key."""

    status_code = status.HTTP_400_BAD_REQUEST


# Not found


class NotFoundError(YogaApiError):
    """Raised when a well-formed identifier references no record."""

    status_code = status.HTTP_404_NOT_FOUND


class SessionNotFoundError(NotFoundError):
    """Raised when a yoga session does not exist."""

    pass


class UserNotFoundError(NotFoundError):
    """Raised when a user account does not exist."""

    pass


class TeacherNotFoundError(NotFoundError):
    """Raised when a teacher does not exist."""

    pass


# Conflicts


class ConflictError(YogaApiError):
    """
    Raised when a request contradicts the current state.

    Reported as a bad request to clients.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class AlreadyParticipatingError(ConflictError):
    """Raised when a user joins a session they already participate in."""

    pass


class NotParticipatingError(ConflictError):
    """Raised when a user leaves a session they do not participate in."""

    pass


class EmailAlreadyTakenError(ConflictError):
    """Raised when registering an email that already has an account."""

    pass


# Authentication


class AuthenticationError(YogaApiError):
    """Base class for failures that map to 401 Unauthorized."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def to_http_exception(self, headers: Optional[Dict[str, str]] = None) -> HTTPException:
        return super().to_http_exception(
            headers={"WWW-Authenticate": "Bearer", **(headers or {})}
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    The same error is used for an unknown email and a wrong password.
    """

    pass


class TokenValidationError(AuthenticationError):
    """Raised when a bearer token cannot be accepted."""

    pass


class InvalidTokenError(TokenValidationError):
    """Raised when a token signature or payload is invalid."""

    pass


class ExpiredTokenError(TokenValidationError):
    """Raised when a correctly signed token is past its expiry."""

    pass


class NotAccountOwnerError(AuthenticationError):
    """Raised when a user acts on an account that is not their own."""

    pass
