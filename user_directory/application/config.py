"""Application configuration using Pydantic Settings."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "user-directory"
    app_version: str = "0.1.0"

    # gRPC server settings
    grpc_host: str = "0.0.0.0"
    grpc_port: int = Field(default=50051, ge=0, le=65535)
    max_workers: int = Field(default=10, ge=1)
    shutdown_grace_seconds: float = 5.0

    # Logging
    log_level: str = "INFO"

    # Directory seed: "static", "file" or "dynamodb"
    seed_source: Literal["static", "file", "dynamodb"] = "static"
    seed_file: Optional[str] = None

    # AWS settings for the DynamoDB seed
    aws_region: str = "us-east-1"
    users_table_name: str = "Users"

    # AWS credentials (optional, uses default credential chain if not set)
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None


# Create a singleton instance
settings = Settings()
