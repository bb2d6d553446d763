"""
Test configuration and fixtures for the items API.

Provides a moto-backed items table plus the gateway, CQRS APIs and
dispatcher wired to it, and a factory for API Gateway proxy events.
"""

import json
from typing import Any, Dict, Optional

import boto3
import pytest
from moto import mock_aws

from items_api import (
    DynamoDBConfig,
    ItemsReadApi,
    ItemsWriteApi,
    create_dispatcher,
    create_table_gateway,
)

TEST_TABLE = "test_items"
TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("DYNAMODB_DEBUG_LOGGING", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        table_name=TEST_TABLE,
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        aws_session_token=None,
        region_name=TEST_REGION,
        endpoint_url=None,  # Use default AWS endpoint for moto
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name=TEST_REGION)


@pytest.fixture
def items_table(mock_dynamodb_resource):
    """Create the items table for testing."""
    return mock_dynamodb_resource.create_table(
        TableName=TEST_TABLE,
        KeySchema=[
            {'AttributeName': 'id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def table_gateway(mock_dynamodb_config, items_table):
    """TableGateway bound to the mocked items table."""
    return create_table_gateway(mock_dynamodb_config)


@pytest.fixture
def items_read_api(table_gateway):
    return ItemsReadApi(table_gateway)


@pytest.fixture
def items_write_api(table_gateway):
    return ItemsWriteApi(table_gateway)


@pytest.fixture
def items_dispatcher(table_gateway):
    """Dispatcher whose read and write APIs share the mocked gateway."""
    return create_dispatcher(table_gateway)


@pytest.fixture
def make_event():
    """Factory for API Gateway REST (payload 1.0) proxy events."""

    def _make_event(
        method: str,
        item_id: Optional[str] = None,
        body: Any = None,
        **overrides: Any
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        event = {
            'resource': '/items/{id}' if item_id is not None else '/items',
            'path': f'/items/{item_id}' if item_id is not None else '/items',
            'httpMethod': method,
            'pathParameters': {'id': item_id} if item_id is not None else None,
            'body': body,
            'isBase64Encoded': False,
            'requestContext': {'requestId': 'test-request-id'},
        }
        event.update(overrides)
        return event

    return _make_event
