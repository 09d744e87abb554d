"""Loaders for the initial directory contents."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ..domain.entities.user import User

logger = logging.getLogger(__name__)

# Default seed used when no other source is configured
DEFAULT_SEED: Dict[str, str] = {
    "1": "Alice",
    "2": "Bob",
}


def load_static_seed() -> List[User]:
    """Return the built-in seed users."""
    return [User(id=user_id, name=name) for user_id, name in DEFAULT_SEED.items()]


def parse_seed(data: Any) -> List[User]:
    """Convert decoded seed data to users.

    Two shapes are accepted: an object mapping IDs to names, or a list of
    objects with ``id`` and ``name`` keys.

    Args:
        data: The decoded JSON document.

    Returns:
        List[User]: The users in document order.

    Raises:
        ValueError: If the document has another shape or an entry is invalid.
    """
    if isinstance(data, dict):
        items = [{"id": user_id, "name": name} for user_id, name in data.items()]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Seed must be a JSON object or a list of user objects")

    users = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Seed entry {index} is not an object")
        try:
            users.append(User(id=item.get("id"), name=item.get("name")))
        except ValidationError as e:
            raise ValueError(f"Invalid seed entry {index}: {e}") from e
    return users


def load_seed_file(path: Union[str, Path]) -> List[User]:
    """Read seed users from a JSON file.

    Args:
        path: Location of the JSON seed file.

    Returns:
        List[User]: The users defined in the file.

    Raises:
        ValueError: If the file is missing or does not hold a valid seed.
    """
    seed_path = Path(path)
    if not seed_path.is_file():
        raise ValueError(f"Seed file {seed_path} not found")

    try:
        data = json.loads(seed_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Seed file {seed_path} is not valid JSON: {e}") from e

    users = parse_seed(data)
    logger.info(f"Loaded {len(users)} users from {seed_path}")
    return users
