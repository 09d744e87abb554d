"""Protocol buffer definitions for the user service."""
