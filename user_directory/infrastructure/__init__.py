"""Infrastructure layer components."""

from .dynamodb_seed_loader import DynamoDBSeedLoader
from .in_memory_user_directory import InMemoryUserDirectory
from .seed_loader import DEFAULT_SEED, load_seed_file, load_static_seed, parse_seed

__all__ = [
    "DEFAULT_SEED",
    "DynamoDBSeedLoader",
    "InMemoryUserDirectory",
    "load_seed_file",
    "load_static_seed",
    "parse_seed",
]
