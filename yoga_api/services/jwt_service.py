"""
JWT token service for the authentication system.

This module issues and verifies the signed bearer tokens handed out on
login. Tokens are stateless: nothing is persisted, every request carries
its own proof.

Dependencies:
- python-jose[cryptography]: JWT token operations
- structlog: Structured logging

Security Features:
- HMAC signing (HS256 by default) with a secret loaded once at startup
- Signature is verified before expiry is looked at
- Injectable clock so expiry can be exercised without waiting
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union

from jose import JWTError, jwt
from jose.constants import ALGORITHMS
import structlog

from ..config.settings import AppSettings, INSECURE_JWT_SECRETS
from ..exceptions import ConfigurationError, ExpiredTokenError, InvalidTokenError

# Configure structured logging
logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JWTService:
    """
    Service class for JWT token issuance and validation.

    Instances are immutable after construction: the secret, algorithm and
    lifetime are fixed for the life of the process and handed in explicitly
    rather than read from module globals.
    """

    DEFAULT_LIFETIME = timedelta(hours=24)

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the JWT service.

        Args:
            secret_key (str): HMAC signing secret
            algorithm (str): One of the HMAC algorithms (HS256/HS384/HS512)
            lifetime (timedelta): Validity window of issued tokens
            clock (Optional[Callable]): Returns the current aware datetime

        Raises:
            ConfigurationError: If the secret, algorithm or lifetime is unusable
        """
        # Fail fast if using insecure defaults
        if not secret_key or secret_key in INSECURE_JWT_SECRETS:
            raise ConfigurationError(
                "JWT_SECRET_KEY environment variable must be set to a secure value"
            )
        if algorithm not in ALGORITHMS.HMAC:
            raise ConfigurationError(
                "Unsupported JWT algorithm", {"algorithm": algorithm}
            )
        if lifetime <= timedelta(0):
            raise ConfigurationError("JWT lifetime must be positive")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock or _utcnow

    @classmethod
    def from_settings(
        cls, settings: AppSettings, clock: Optional[Callable[[], datetime]] = None
    ) -> "JWTService":
        """Build the service from application settings."""
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            lifetime=settings.jwt_lifetime,
            clock=clock,
        )

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self._lifetime.total_seconds())

    def issue(self, subject: Union[str, int]) -> str:
        """
        Create a signed token for the given subject.

        Args:
            subject (Union[str, int]): Identity the token speaks for

        Returns:
            str: Encoded JWT
        """
        issued_at = self._clock()
        expires_at = issued_at + self._lifetime

        claims = {
            "sub": str(subject),
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        token = jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

        logger.info(
            "Access token issued",
            subject=str(subject),
            expires_at=expires_at.isoformat(),
        )

        return token

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject.

        Args:
            token (str): Encoded JWT

        Returns:
            str: The subject the token was issued for

        Raises:
            InvalidTokenError: Bad signature, altered payload or malformed claims
            ExpiredTokenError: Valid signature but the token is past its expiry
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.warning("JWT validation failed", error=str(e))
            raise InvalidTokenError("Invalid token")
        except (TypeError, AttributeError) as e:
            logger.warning("Token format error", error=str(e))
            raise InvalidTokenError("Invalid token format")

        subject = payload.get("sub")
        expires_at = payload.get("exp")

        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Missing required claim: sub")
        if not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            raise InvalidTokenError("Missing required claim: exp")

        if self._clock().timestamp() > expires_at:
            logger.info("Expired token presented", subject=subject)
            raise ExpiredTokenError("Token has expired")

        return subject
