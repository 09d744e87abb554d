"""Protobuf messages and gRPC stubs for the user service.

The modules are generated from ``protos/user.proto`` at import time by
grpcio-tools, so the ``.proto`` file is the only definition of the contract.
"""

import grpc

PROTO_PATH = "user_directory/application/protos/user.proto"

user_pb2, user_pb2_grpc = grpc.protos_and_services(PROTO_PATH)

GetUserRequest = user_pb2.GetUserRequest
GetUserResponse = user_pb2.GetUserResponse

USER_SERVICE_DESCRIPTOR = user_pb2.DESCRIPTOR.services_by_name["UserService"]
SERVICE_NAME = USER_SERVICE_DESCRIPTOR.full_name
GET_USER_METHOD = f"/{SERVICE_NAME}/GetUser"

__all__ = [
    "GET_USER_METHOD",
    "GetUserRequest",
    "GetUserResponse",
    "PROTO_PATH",
    "SERVICE_NAME",
    "USER_SERVICE_DESCRIPTOR",
    "user_pb2",
    "user_pb2_grpc",
]
