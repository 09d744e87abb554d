"""DynamoDB source for the initial directory contents."""

import logging
from typing import Any, Dict, List, Optional

import boto3

from ..domain.entities.user import User

logger = logging.getLogger(__name__)


class DynamoDBSeedLoader:
    """Reads a one-time snapshot of the users table at startup."""

    def __init__(
        self,
        table_name: str,
        region_name: str = "us-east-1",
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
        aws_session_token: Optional[str] = None,
    ):
        """Initialize the DynamoDB seed loader.

        Args:
            table_name: The name of the DynamoDB table.
            region_name: AWS region name (default: us-east-1).
            aws_access_key_id: Optional explicit credentials; the default
                credential chain is used when omitted.
            aws_secret_access_key: Optional explicit credentials.
            aws_session_token: Optional explicit credentials.
        """
        self.table_name = table_name
        self.dynamodb = boto3.resource(
            "dynamodb",
            region_name=region_name,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            aws_session_token=aws_session_token,
        )
        self.table = self.dynamodb.Table(table_name)

    def load(self) -> List[User]:
        """Scan the whole table and return its users.

        Returns:
            List[User]: Every user in the table.

        Raises:
            ValueError: If an item lacks an ``id`` or ``name`` attribute.
        """
        users: List[User] = []
        scan_kwargs: Dict[str, Any] = {}

        while True:
            response = self.table.scan(**scan_kwargs)
            for item in response.get("Items", []):
                users.append(self._item_to_user(item))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            scan_kwargs["ExclusiveStartKey"] = last_key

        logger.info(f"Loaded {len(users)} users from DynamoDB table {self.table_name}")
        return users

    def _item_to_user(self, item: Dict[str, Any]) -> User:
        """Convert a DynamoDB item to a User entity.

        Args:
            item: The DynamoDB item.

        Returns:
            User: The user entity.
        """
        if "id" not in item or "name" not in item:
            raise ValueError(f"DynamoDB item is missing id or name: {item}")

        return User(id=str(item["id"]), name=str(item["name"]))
