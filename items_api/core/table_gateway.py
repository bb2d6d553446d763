"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around the boto3 DynamoDB Table
resource for the items table. The gateway:

1. Owns the boto3 session, resource and Table handle, created lazily once
2. Exposes only the four primitives the handlers need (get, put, scan, delete)
3. Maps every botocore failure to a single StoreError carrying the raw error text

There are no conditional writes: put_item is an unconditional upsert and
delete_item is idempotent. Retries are whatever the configuration allows,
which is none by default.
"""

import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import DynamoDBConfig
from ..exceptions import StoreError

logger = logging.getLogger(__name__)

# Coarse categories used only for log context; the response is a 500 either way.
ERROR_CATEGORIES = {
    'ProvisionedThroughputExceededException': 'throttling',
    'RequestLimitExceeded': 'throttling',
    'ThrottlingException': 'throttling',
    'UnrecognizedClientException': 'auth',
    'AccessDeniedException': 'auth',
    'ExpiredTokenException': 'auth',
    'InvalidSignatureException': 'auth',
    'ResourceNotFoundException': 'missing_table',
    'ValidationException': 'validation',
    'InternalServerError': 'service',
    'ServiceUnavailable': 'service',
}


def map_dynamodb_error(
    error: Exception,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> StoreError:
    """Map a botocore error to a StoreError.

    ClientErrors keep their DynamoDB error code; BotoCoreErrors (network,
    endpoint and credential problems) have none. In both cases the message
    is the original error text.

    Args:
        error: The botocore ClientError or BotoCoreError
        operation: The operation that failed (e.g., "GetItem", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional item id for context

    Returns:
        StoreError chained to the original error
    """
    error_code = None
    if isinstance(error, ClientError):
        error_code = error.response.get('Error', {}).get('Code')

    category = ERROR_CATEGORIES.get(error_code, 'network' if error_code is None else 'unknown')

    context = f"{operation} on {table_name}"
    if resource_id is not None:
        context += f" (resource: {resource_id!r})"
    logger.error(f"{context} failed [{category}]: {error}")

    return StoreError(
        str(error),
        error_code=error_code,
        operation=operation,
        table_name=table_name,
        original_error=error
    )


class TableGateway:
    """
    Gateway for the items DynamoDB table.

    One instance is shared by every invocation in a process; boto3 resources
    are created on first use and reused afterwards.
    """

    def __init__(self, config: DynamoDBConfig, table_name: str):
        """Initialize table gateway.

        Args:
            config: DynamoDB configuration
            table_name: Name of the DynamoDB table
        """
        self.config = config
        self.table_name = table_name
        self._dynamodb = None
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    aws_session_token=self.config.aws_session_token,
                    region_name=self.config.region_name
                )

                # Configure connection parameters
                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries, 'mode': 'standard'},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise StoreError(f"Failed to connect to DynamoDB: {e}", table_name=self.table_name, original_error=e) from e
        return self._dynamodb

    @property
    def table(self):
        """boto3 DynamoDB Table resource for the items table."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except StoreError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise StoreError(f"Failed to access table '{self.table_name}': {e}", table_name=self.table_name, original_error=e) from e
        return self._table

    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Fetch one item by primary key.

        Args:
            key: Primary key of the item

        Returns:
            The stored item, or None when no item has that key
        """
        table = self.table
        try:
            response = table.get_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, key.get('id')) from e
        return response.get('Item')

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Unconditionally put an item, overwriting any item with the same key.

        Args:
            item: Item to store
        """
        table = self.table
        try:
            table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, item.get('id')) from e
        logger.info(f"Put item in {self.table_name}: {item.get('id')!r}")

    def scan_all(self, **kwargs) -> List[Dict[str, Any]]:
        """
        Scan the whole table.

        Follows LastEvaluatedKey until the table is exhausted, so the result
        holds every item in the order DynamoDB returned them.

        Args:
            **kwargs: Extra boto3 scan parameters

        Returns:
            All scanned items
        """
        table = self.table
        items: List[Dict[str, Any]] = []
        scan_kwargs = dict(kwargs)
        pages = 0
        try:
            while True:
                response = table.scan(**scan_kwargs)
                pages += 1
                items.extend(response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_key
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        logger.debug(f"Scanned {len(items)} items from {self.table_name} in {pages} page(s)")
        return items

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete an item by primary key. Deleting a missing item is not an error.

        Args:
            key: Primary key of item to delete
        """
        table = self.table
        try:
            table.delete_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, key.get('id')) from e
        logger.info(f"Deleted item from {self.table_name}: {key.get('id')!r}")


def create_table_gateway(config: DynamoDBConfig) -> TableGateway:
    """
    Factory function to create the TableGateway for the configured table.

    Args:
        config: DynamoDB configuration

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, config.table_name)
