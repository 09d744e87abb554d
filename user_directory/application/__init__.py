"""Application layer: gRPC contract, servicer and server bootstrap."""
