"""gRPC servicer for the user service."""

import logging
from typing import NoReturn, Tuple

import grpc

from ..domain.exceptions import UserLookupError, diagnostic_id
from ..domain.services.lookup_service import UserLookupService
from .messages import GetUserRequest, GetUserResponse, user_pb2_grpc

logger = logging.getLogger(__name__)

# Trailing metadata keys describing a failed lookup
ERROR_KIND_KEY = "error-kind"
USER_ID_KEY = "user-id"
USER_ID_BIN_KEY = "user-id-bin"


def error_metadata(error: UserLookupError) -> Tuple[Tuple[str, object], ...]:
    """Build the trailing metadata for a lookup failure.

    Long IDs are shortened, and non-ASCII IDs travel in the binary
    ``user-id-bin`` header because plain metadata values must be printable
    ASCII.
    """
    metadata: Tuple[Tuple[str, object], ...] = ((ERROR_KIND_KEY, error.kind),)
    if error.user_id:
        user_id = diagnostic_id(error.user_id)
        if user_id.isascii() and user_id.isprintable():
            metadata += ((USER_ID_KEY, user_id),)
        else:
            metadata += ((USER_ID_BIN_KEY, user_id.encode("utf-8")),)
    return metadata


class UserServiceServicer(user_pb2_grpc.UserServiceServicer):
    """
    Thin adapter between the gRPC runtime and the lookup service.

    Domain failures become gRPC status codes; the servicer itself holds no
    per-call state.
    """

    def __init__(self, lookup_service: UserLookupService):
        self.lookup_service = lookup_service

    def GetUser(self, request: GetUserRequest, context: grpc.ServicerContext) -> GetUserResponse:
        """Resolve ``request.id`` and return the matching user.

        Args:
            request: The decoded GetUserRequest.
            context: The gRPC call context.

        Returns:
            GetUserResponse: The user's id and name.
        """
        try:
            user = self.lookup_service.get_user(request.id)
        except UserLookupError as e:
            self._abort(context, e)
        except Exception:
            logger.exception(f"Unexpected error looking up user {diagnostic_id(request.id)!r}")
            raise

        return GetUserResponse(id=user.id, name=user.name)

    @staticmethod
    def _abort(context: grpc.ServicerContext, error: UserLookupError) -> NoReturn:
        context.set_trailing_metadata(error_metadata(error))
        context.abort(getattr(grpc.StatusCode, error.kind), str(error))


def add_user_service_to_server(servicer: UserServiceServicer, server: grpc.Server) -> None:
    """Register the user service on a gRPC server."""
    user_pb2_grpc.add_UserServiceServicer_to_server(servicer, server)
