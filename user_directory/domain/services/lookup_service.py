"""Lookup service implementing the GetUser operation."""

import logging

from ..entities.user import User
from ..exceptions import InvalidUserIdError, UserNotFoundError, diagnostic_id
from ..interfaces.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class UserLookupService:
    """
    Resolves user IDs against a directory.

    The service holds only a reference to the directory it was given, so a
    single instance can be shared across every worker thread of the server.
    """

    def __init__(self, directory: UserDirectory):
        self.directory = directory

    def get_user(self, user_id: str) -> User:
        """Return the user with the given ID.

        Args:
            user_id: The requested identifier.

        Returns:
            User: The matching directory entry.

        Raises:
            InvalidUserIdError: If the ID is empty or blank.
            UserNotFoundError: If the directory has no such user.
        """
        if not user_id or not user_id.strip():
            logger.debug("Rejected lookup with empty user id")
            raise InvalidUserIdError(user_id)

        user = self.directory.find(user_id)
        if user is None:
            logger.info(f"User {diagnostic_id(user_id)} not found")
            raise UserNotFoundError(user_id)

        return user
