"""User directory protocol."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.user import User


@runtime_checkable
class UserDirectory(Protocol):
    """Protocol for read-only user directories."""

    def find(self, user_id: str) -> Optional[User]:
        """Look up a user by ID.

        Args:
            user_id: The identifier to look up. Any string is accepted.

        Returns:
            Optional[User]: The matching user, or None if the ID is unknown.
        """
        ...
