"""Domain interfaces for the user directory service."""

from .user_directory import UserDirectory

__all__ = ["UserDirectory"]
