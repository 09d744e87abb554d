"""Domain services for the user directory."""

from .lookup_service import UserLookupService

__all__ = ["UserLookupService"]
