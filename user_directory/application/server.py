"""gRPC server bootstrap for the user directory service."""

import logging
import threading
from concurrent import futures
from typing import Optional

import grpc
from grpc_health.v1 import health, health_pb2, health_pb2_grpc

from ..domain.interfaces.user_directory import UserDirectory
from ..domain.services.lookup_service import UserLookupService
from ..infrastructure.dynamodb_seed_loader import DynamoDBSeedLoader
from ..infrastructure.in_memory_user_directory import InMemoryUserDirectory
from ..infrastructure.seed_loader import load_seed_file, load_static_seed
from .config import Settings, settings
from .interceptors import LoggingInterceptor
from .messages import SERVICE_NAME
from .servicer import UserServiceServicer, add_user_service_to_server

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def build_directory(config: Settings) -> InMemoryUserDirectory:
    """Build the immutable directory from the configured seed source.

    Args:
        config: Application settings.

    Returns:
        InMemoryUserDirectory: The populated directory.

    Raises:
        ValueError: If the seed source is misconfigured or holds invalid data.
    """
    if config.seed_source == "file":
        if not config.seed_file:
            raise ValueError("seed_file must be set when seed_source is 'file'")
        users = load_seed_file(config.seed_file)
    elif config.seed_source == "dynamodb":
        loader = DynamoDBSeedLoader(
            table_name=config.users_table_name,
            region_name=config.aws_region,
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            aws_session_token=config.aws_session_token,
        )
        users = loader.load()
    else:
        users = load_static_seed()

    directory = InMemoryUserDirectory(users)
    logger.info(f"User directory ready with {len(directory)} users from {config.seed_source} seed")
    return directory


class UserDirectoryServer:
    """
    Wires the directory, lookup service and servicer onto a gRPC server.

    Calls are dispatched on a thread pool; every worker shares the same
    lookup service and the same read-only directory.
    """

    def __init__(
        self,
        directory: UserDirectory,
        host: str = "0.0.0.0",
        port: int = 50051,
        max_workers: int = 10,
    ):
        """
        Build and register the services, and bind the listening port.

        Args:
            directory: The directory to serve
            host: Interface to bind
            port: Port to bind; 0 picks a free port
            max_workers: Size of the worker thread pool
        """
        self.lookup_service = UserLookupService(directory)
        self.servicer = UserServiceServicer(self.lookup_service)
        self.health_servicer = health.HealthServicer()

        self.server = grpc.server(
            futures.ThreadPoolExecutor(max_workers=max_workers),
            interceptors=(LoggingInterceptor(),),
        )
        add_user_service_to_server(self.servicer, self.server)
        health_pb2_grpc.add_HealthServicer_to_server(self.health_servicer, self.server)

        self.host = host
        self.port = self.server.add_insecure_port(f"{host}:{port}")
        if self.port == 0:
            raise RuntimeError(f"Failed to bind gRPC server to {host}:{port}")

    @classmethod
    def from_settings(
        cls, config: Settings, directory: Optional[UserDirectory] = None
    ) -> "UserDirectoryServer":
        """Create a server from settings, building the directory if not given."""
        if directory is None:
            directory = build_directory(config)
        return cls(
            directory,
            host=config.grpc_host,
            port=config.grpc_port,
            max_workers=config.max_workers,
        )

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    def start(self) -> None:
        self.server.start()
        self.health_servicer.set("", health_pb2.HealthCheckResponse.SERVING)
        self.health_servicer.set(SERVICE_NAME, health_pb2.HealthCheckResponse.SERVING)
        logger.info(f"gRPC server running at {self.address}")

    def stop(self, grace: Optional[float] = None) -> threading.Event:
        """Stop accepting calls and let in-flight calls finish within ``grace`` seconds."""
        self.health_servicer.enter_graceful_shutdown()
        logger.info("gRPC server shutting down")
        return self.server.stop(grace)

    def wait_for_termination(self, timeout: Optional[float] = None) -> bool:
        return self.server.wait_for_termination(timeout)

    def __enter__(self) -> "UserDirectoryServer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop(None).wait()


def serve(config: Settings = settings) -> None:
    """Run the server until interrupted."""
    configure_logging(config.log_level)
    server = UserDirectoryServer.from_settings(config)
    server.start()
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        server.stop(config.shutdown_grace_seconds).wait()


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
