"""
Core infrastructure for DynamoDB access.

- TableGateway: thin wrapper over the boto3 Table resource for the items table
- create_table_gateway: factory building the gateway from configuration
- map_dynamodb_error: botocore error to StoreError mapping
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
