"""
Integration tests for the user service over a real gRPC channel.

A server is started in-process on an ephemeral localhost port with the
default seed: {"1": "Alice", "2": "Bob"}.
"""

from concurrent.futures import ThreadPoolExecutor

import grpc
import pytest
from grpc_health.v1 import health_pb2, health_pb2_grpc

from user_directory.application.client import UserServiceClient
from user_directory.application.messages import (
    GET_USER_METHOD,
    SERVICE_NAME,
    GetUserRequest,
    GetUserResponse,
)
from user_directory.application.server import UserDirectoryServer
from user_directory.domain.entities.user import User
from user_directory.domain.exceptions import (
    MAX_DIAGNOSTIC_ID_LENGTH,
    InvalidUserIdError,
    UserNotFoundError,
)
from user_directory.infrastructure.in_memory_user_directory import InMemoryUserDirectory


@pytest.fixture(scope="module")
def server():
    directory = InMemoryUserDirectory.from_mapping({"1": "Alice", "2": "Bob"})
    with UserDirectoryServer(directory, host="127.0.0.1", port=0, max_workers=8) as running:
        yield running


@pytest.fixture(scope="module")
def channel(server):
    with grpc.insecure_channel(f"127.0.0.1:{server.port}") as channel:
        grpc.channel_ready_future(channel).result(timeout=10)
        yield channel


@pytest.fixture
def get_user(channel):
    """Raw unary callable, for asserting on status codes."""
    return channel.unary_unary(
        GET_USER_METHOD,
        request_serializer=GetUserRequest.SerializeToString,
        response_deserializer=GetUserResponse.FromString,
    )


@pytest.fixture
def client(channel):
    return UserServiceClient(channel, timeout=5)


@pytest.mark.parametrize("user_id, name", [("1", "Alice"), ("2", "Bob")])
def test_get_existing_user(get_user, user_id, name):
    """Test scenarios 1 and 2: known ids return their records."""
    response = get_user(GetUserRequest(id=user_id), timeout=5)

    assert response.id == user_id
    assert response.name == name


def test_get_unknown_user(get_user):
    """Test scenario 3: an unknown id fails with NOT_FOUND referencing the id."""
    with pytest.raises(grpc.RpcError) as exc_info:
        get_user(GetUserRequest(id="3"), timeout=5)

    error = exc_info.value
    assert error.code() == grpc.StatusCode.NOT_FOUND
    assert "3" in error.details()
    metadata = dict(error.trailing_metadata())
    assert metadata["error-kind"] == "NOT_FOUND"
    assert metadata["user-id"] == "3"


def test_get_long_unknown_id(get_user):
    """Test that a 20 KB unknown id fails with NOT_FOUND rather than a metadata error."""
    user_id = "x" * 20000

    with pytest.raises(grpc.RpcError) as exc_info:
        get_user(GetUserRequest(id=user_id), timeout=5)

    error = exc_info.value
    assert error.code() == grpc.StatusCode.NOT_FOUND
    metadata = dict(error.trailing_metadata())
    assert metadata["user-id"] == "x" * MAX_DIAGNOSTIC_ID_LENGTH + "..."


def test_client_long_unknown_id(client):
    """Test that the client maps a long unknown id to UserNotFoundError."""
    with pytest.raises(UserNotFoundError):
        client.get_user("z" * 20000)


def test_get_empty_id(get_user):
    """Test scenario 4: an empty id fails with INVALID_ARGUMENT."""
    with pytest.raises(grpc.RpcError) as exc_info:
        get_user(GetUserRequest(id=""), timeout=5)

    assert exc_info.value.code() == grpc.StatusCode.INVALID_ARGUMENT
    assert dict(exc_info.value.trailing_metadata())["error-kind"] == "INVALID_ARGUMENT"


def test_concurrent_calls(client):
    """Test scenario 5: 100 concurrent calls each get their own record."""
    expected = {"1": User(id="1", name="Alice"), "2": User(id="2", name="Bob")}
    user_ids = ["1" if i % 2 == 0 else "2" for i in range(100)]

    with ThreadPoolExecutor(max_workers=20) as pool:
        results = list(pool.map(client.get_user, user_ids))

    assert len(results) == 100
    for user_id, result in zip(user_ids, results):
        assert result == expected[user_id]


def test_concurrent_mixed_outcomes(client):
    """Test that failures and successes do not interfere under concurrency."""

    def outcome(user_id):
        try:
            return client.get_user(user_id).name
        except UserNotFoundError:
            return "NOT_FOUND"
        except InvalidUserIdError:
            return "INVALID_ARGUMENT"

    user_ids = ["1", "2", "3", ""] * 25
    expected = {"1": "Alice", "2": "Bob", "3": "NOT_FOUND", "": "INVALID_ARGUMENT"}

    with ThreadPoolExecutor(max_workers=20) as pool:
        results = list(pool.map(outcome, user_ids))

    assert results == [expected[user_id] for user_id in user_ids]


def test_repeated_calls_are_identical(client):
    """Test that the same id always returns the same record."""
    results = {client.get_user("2") for _ in range(10)}

    assert results == {User(id="2", name="Bob")}


def test_client_maps_not_found(client):
    """Test that the client raises UserNotFoundError for unknown ids."""
    with pytest.raises(UserNotFoundError) as exc_info:
        client.get_user("42")

    assert exc_info.value.user_id == "42"


def test_client_maps_invalid_argument(client):
    """Test that the client raises InvalidUserIdError for empty ids."""
    with pytest.raises(InvalidUserIdError):
        client.get_user("")


def test_client_propagates_other_errors():
    """Test that transport errors reach the caller as grpc.RpcError."""
    with grpc.insecure_channel("127.0.0.1:1") as channel:
        client = UserServiceClient(channel, timeout=0.5)

        with pytest.raises(grpc.RpcError) as exc_info:
            client.get_user("1")

    assert exc_info.value.code() in (
        grpc.StatusCode.UNAVAILABLE,
        grpc.StatusCode.DEADLINE_EXCEEDED,
    )


@pytest.mark.parametrize("service", ["", SERVICE_NAME])
def test_health_check(channel, service):
    """Test that the health service reports SERVING."""
    stub = health_pb2_grpc.HealthStub(channel)

    response = stub.Check(health_pb2.HealthCheckRequest(service=service), timeout=5)

    assert response.status == health_pb2.HealthCheckResponse.SERVING
