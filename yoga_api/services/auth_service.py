"""
Authentication service.

This module orchestrates the two credential flows of the API:
- Login: credential lookup, password verification and token issuance
- Registration: email uniqueness check, password hashing and account creation

Dependencies:
- sqlalchemy: IntegrityError from the unique email index
- structlog: Structured logging

Security Features:
- Unknown email and wrong password fail with the same error
- A dummy hash check runs for unknown emails so timing matches
- New accounts are never administrators
"""

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
import structlog

from ..database import User, UserRepository
from ..exceptions import EmailAlreadyTakenError, InvalidCredentialsError
from .jwt_service import JWTService
from .password_service import PasswordHasher

# Configure structured logging
logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Token plus the account it was issued for."""

    token: str
    user: User


class AuthService:
    """
    Service class for login and registration.

    Stateless: holds its collaborators only, no per-user state survives
    the request.
    """

    def __init__(
        self,
        users: UserRepository,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
    ):
        self.users = users
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service

    def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate credentials and issue a token.

        Args:
            email (str): Account email, matched exactly
            password (str): Plain text password

        Returns:
            LoginResult: Signed token and the authenticated user

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        user = self.users.find_by_email(email)

        if user is None:
            self.password_hasher.dummy_verify()
            logger.info("Authentication failed", reason="unknown_email")
            raise InvalidCredentialsError("Bad credentials")

        if not self.password_hasher.matches(password, user.password):
            logger.info(
                "Authentication failed", reason="password_mismatch", user_id=user.id
            )
            raise InvalidCredentialsError("Bad credentials")

        token = self.jwt_service.issue(user.id)

        logger.info("User authenticated successfully", user_id=user.id)

        return LoginResult(token=token, user=user)

    def register(
        self, email: str, password: str, first_name: str, last_name: str
    ) -> User:
        """
        Create a new, non-admin account.

        Raises:
            EmailAlreadyTakenError: If an account already uses this email
        """
        if self.users.exists_by_email(email):
            logger.info("Registration rejected - email already taken")
            raise EmailAlreadyTakenError("Error: Email is already taken!")

        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password=self.password_hasher.hash(password),
            admin=False,
        )

        try:
            user = self.users.save(user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            logger.warning("Registration rejected by unique email index")
            raise EmailAlreadyTakenError("Error: Email is already taken!")

        logger.info("User registered successfully", user_id=user.id)

        return user
