import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for the items table and the DynamoDB connection."""

    table_name: str = Field(
        default_factory=lambda: os.getenv("DYNAMO_TABLE", ""),
        description="Name of the DynamoDB table holding the items"
    )

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    aws_session_token: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SESSION_TOKEN"),
        description="AWS session token (set by the Lambda runtime)"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=0,
        description="Number of botocore retry attempts; 0 surfaces the first failure"
    )

    timeout_seconds: float = Field(
        default=10.0,
        description="Connect and read timeout in seconds"
    )

    # Logging settings
    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper(),
        description="Log level for the handler"
    )

    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('table_name')
    @classmethod
    def validate_table_name(cls, v):
        """Validate the table name is set."""
        if not v:
            raise ValueError("DynamoDB table name is required (set DYNAMO_TABLE)")
        return v

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('retries')
    @classmethod
    def validate_retries(cls, v):
        if v < 0:
            raise ValueError("Retries cannot be negative")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level name."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, forced to DEBUG when debug logging is enabled."""
        if self.enable_debug_logging:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, table_name: str = "items") -> 'DynamoDBConfig':
        """Create configuration for local DynamoDB development.

        Args:
            table_name: Table to use on the local endpoint

        Returns:
            DynamoDBConfig instance configured for local development
        """
        return cls(
            table_name=table_name,
            aws_access_key_id="local",
            aws_secret_access_key="local",
            aws_session_token=None,
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True
    )
