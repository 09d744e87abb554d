"""Domain errors raised by the lookup service."""

from typing import Optional

# Longest ID copied into error messages and trailing metadata
MAX_DIAGNOSTIC_ID_LENGTH = 256


def diagnostic_id(user_id: str) -> str:
    """Shorten an ID for diagnostics so it stays within gRPC metadata limits."""
    if len(user_id) <= MAX_DIAGNOSTIC_ID_LENGTH:
        return user_id
    return user_id[:MAX_DIAGNOSTIC_ID_LENGTH] + "..."


class UserLookupError(Exception):
    """Base class for lookup failures.

    Attributes:
        user_id: The identifier the caller asked for.
        kind: Machine-readable failure kind, matching a gRPC status code name.
    """

    kind = "UNKNOWN"

    def __init__(self, message: str, user_id: Optional[str] = None):
        super().__init__(message)
        self.user_id = user_id


class InvalidUserIdError(UserLookupError):
    """The request carried an empty or blank user ID."""

    kind = "INVALID_ARGUMENT"

    def __init__(self, user_id: Optional[str] = None):
        super().__init__("User id must be a non-empty string", user_id=user_id)


class UserNotFoundError(UserLookupError):
    """No user exists with the requested ID."""

    kind = "NOT_FOUND"

    def __init__(self, user_id: str):
        super().__init__(f"User with id {diagnostic_id(user_id)} not found", user_id=user_id)
