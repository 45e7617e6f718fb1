"""
Password hashing service.

Dependencies:
- passlib[bcrypt]: Secure password hashing
"""

from passlib.context import CryptContext


class PasswordHasher:
    """
    One-way password hashing with constant-time verification.

    Wraps a passlib CryptContext configured for bcrypt. The cost factor is
    taken from settings so tests can run with a cheap one.
    """

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, raw_password: str) -> str:
        """Hash a plain text password."""
        return self._context.hash(raw_password)

    def matches(self, raw_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a stored hash.

        Returns False for hashes passlib cannot identify instead of raising.
        """
        try:
            return self._context.verify(raw_password, hashed_password)
        except ValueError:
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification when there is no hash to check."""
        self._context.dummy_verify()
