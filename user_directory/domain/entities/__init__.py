"""Domain entities for the user directory service."""

from .user import User

__all__ = ["User"]
