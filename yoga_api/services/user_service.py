"""
User management service.

Account lookup and self-service deletion.
"""

from typing import Union

import structlog

from ..database import User, UserRepository
from ..exceptions import NotAccountOwnerError, UserNotFoundError
from ..utils.validation import parse_identifier

# Configure structured logging
logger = structlog.get_logger(__name__)


class UserService:
    """Service class for user account operations."""

    def __init__(self, users: UserRepository):
        self.users = users

    def get_by_id(self, user_id: Union[str, int]) -> User:
        """
        Retrieve a user by id.

        Raises:
            MalformedIdentifierError: Invalid id
            UserNotFoundError: No such user
        """
        uid = parse_identifier(user_id, "user")
        user = self.users.find_by_id(uid)
        if user is None:
            raise UserNotFoundError("User not found", {"user_id": uid})
        return user

    def delete(self, user_id: Union[str, int], requested_by: User) -> None:
        """
        Delete an account. Only the account holder may do this.

        Args:
            user_id: Account to delete
            requested_by: Authenticated user making the request

        Raises:
            MalformedIdentifierError: Invalid id
            UserNotFoundError: No such user
            NotAccountOwnerError: The requester is someone else
        """
        user = self.get_by_id(user_id)

        if user.id != requested_by.id:
            logger.warning(
                "Account deletion refused",
                user_id=user.id,
                requested_by=requested_by.id,
            )
            raise NotAccountOwnerError("Cannot delete another user's account")

        uid = user.id
        self.users.delete_by_id(uid)

        logger.info("User account deleted", user_id=uid)
