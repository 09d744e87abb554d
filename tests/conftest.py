"""Shared fixtures for the user directory tests."""

import pytest

from user_directory.domain.services.lookup_service import UserLookupService
from user_directory.infrastructure.in_memory_user_directory import InMemoryUserDirectory

SEED = {"1": "Alice", "2": "Bob"}


@pytest.fixture
def directory():
    """Directory seeded with Alice and Bob."""
    return InMemoryUserDirectory.from_mapping(SEED)


@pytest.fixture
def lookup_service(directory):
    """Lookup service over the seeded directory."""
    return UserLookupService(directory)
