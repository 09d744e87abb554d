"""In-memory implementation of UserDirectory."""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from ..domain.entities.user import User
from ..domain.interfaces.user_directory import UserDirectory


class InMemoryUserDirectory(UserDirectory):
    """Immutable in-memory implementation of the UserDirectory protocol.

    The users are copied into a private dictionary at construction and only
    exposed through a read-only view, so lookups need no locking.
    """

    def __init__(self, users: Iterable[User]):
        """Build the directory from a seed of users.

        Args:
            users: The users to serve.

        Raises:
            ValueError: If two users share the same ID.
        """
        entries: Dict[str, User] = {}
        for user in users:
            if user.id in entries:
                raise ValueError(f"Duplicate user id {user.id} in directory seed")
            entries[user.id] = user

        self._users: Mapping[str, User] = MappingProxyType(entries)

    @classmethod
    def from_mapping(cls, names: Mapping[str, str]) -> "InMemoryUserDirectory":
        """Build a directory from an ``{id: name}`` mapping."""
        return cls(User(id=user_id, name=name) for user_id, name in names.items())

    def find(self, user_id: str) -> Optional[User]:
        """Look up a user by ID.

        Args:
            user_id: The identifier to look up.

        Returns:
            Optional[User]: The matching user, or None if the ID is unknown.
        """
        return self._users.get(user_id)

    def ids(self) -> List[str]:
        """Return the known user IDs in seed order."""
        return list(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)
