"""Domain layer for the user directory service."""
