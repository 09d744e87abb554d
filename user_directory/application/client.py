"""Client for the user service."""

from typing import Optional

import grpc

from ..domain.entities.user import User
from ..domain.exceptions import InvalidUserIdError, UserNotFoundError
from .messages import GetUserRequest, user_pb2_grpc


class UserServiceClient:
    """Typed wrapper around a channel to the user service.

    NOT_FOUND and INVALID_ARGUMENT are raised as the matching domain
    exceptions; any other ``grpc.RpcError`` propagates unchanged.
    """

    def __init__(self, channel: grpc.Channel, timeout: Optional[float] = None):
        """Initialize the client.

        Args:
            channel: An open gRPC channel to the service.
            timeout: Optional per-call deadline in seconds.
        """
        self.timeout = timeout
        self.stub = user_pb2_grpc.UserServiceStub(channel)

    def get_user(self, user_id: str) -> User:
        """Fetch a user by ID.

        Args:
            user_id: The identifier to look up.

        Returns:
            User: The user returned by the service.

        Raises:
            InvalidUserIdError: If the service rejected the ID.
            UserNotFoundError: If the service has no such user.
        """
        try:
            response = self.stub.GetUser(GetUserRequest(id=user_id), timeout=self.timeout)
        except grpc.RpcError as e:
            if e.code() == grpc.StatusCode.NOT_FOUND:
                raise UserNotFoundError(user_id) from e
            if e.code() == grpc.StatusCode.INVALID_ARGUMENT:
                raise InvalidUserIdError(user_id) from e
            raise

        return User(id=response.id, name=response.name)
