"""
End-to-end tests through the Lambda entry point.

Events are fed to ``items_api.lambda_function.handler`` with a moto table
behind it, exactly as API Gateway would invoke the function.
"""

import base64
import json
from unittest.mock import patch

import pytest

from items_api import lambda_function
from items_api.exceptions import ConfigurationError


@pytest.fixture
def lambda_env(monkeypatch, items_table):
    """Environment the function is deployed with, plus a fresh dispatcher."""
    monkeypatch.setenv("DYNAMO_TABLE", items_table.name)
    lambda_function.reset_dispatcher()
    yield
    lambda_function.reset_dispatcher()


def invoke(event):
    return lambda_function.handler(event, None)


@pytest.mark.usefixtures("lambda_env")
class TestLambdaHandler:
    """Full request/response cycles."""

    def test_crud_scenario(self, make_event):
        response = invoke(make_event('POST', body={'id': '1', 'name': 'a'}))
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': 'a'}

        response = invoke(make_event('GET', item_id='1'))
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': 'a'}

        response = invoke(make_event('PUT', item_id='1', body={'id': 'ignored', 'name': 'b'}))
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': 'b'}

        response = invoke(make_event('DELETE', item_id='1'))
        assert response['statusCode'] == 200
        assert response['body'] == 'Deleted item 1'

        response = invoke(make_event('GET', item_id='1'))
        assert response['statusCode'] == 404
        assert response['body'] == 'Item not found'

    def test_list_empty_table(self, make_event):
        response = invoke(make_event('GET'))

        assert response['statusCode'] == 200
        assert response['body'] == '[]'
        assert response['headers']['Content-Type'] == 'application/json'

    def test_list_after_creates(self, make_event):
        invoke(make_event('POST', body={'id': '1', 'name': 'a'}))
        invoke(make_event('POST', body={'id': '2', 'name': 'b'}))

        response = invoke(make_event('GET'))

        body = json.loads(response['body'])
        assert sorted(body, key=lambda i: i['id']) == [
            {'id': '1', 'name': 'a'},
            {'id': '2', 'name': 'b'},
        ]

    def test_unsupported_method(self, make_event):
        response = invoke(make_event('PATCH', item_id='1', body={'name': 'x'}))

        assert response['statusCode'] == 405
        assert response['body'] == ''

    def test_malformed_body(self, make_event, items_table):
        response = invoke(make_event('POST', body='{"id": "1",'))

        assert response['statusCode'] == 400
        assert response['body']
        assert items_table.scan()['Items'] == []

    def test_missing_body(self, make_event, items_table):
        response = invoke(make_event('PUT', item_id='1'))

        assert response['statusCode'] == 400
        assert items_table.scan()['Items'] == []

    def test_delete_missing_item(self, make_event):
        response = invoke(make_event('DELETE', item_id='ghost'))

        assert response['statusCode'] == 200
        assert response['body'] == 'Deleted item ghost'

        response = invoke(make_event('GET', item_id='ghost'))
        assert response['statusCode'] == 404
        assert response['body'] == 'Item not found'

    def test_create_without_name_stores_empty_name(self, make_event, items_table):
        response = invoke(make_event('POST', body='{"id": "1"}'))

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': ''}
        assert items_table.get_item(Key={'id': '1'})['Item'] == {'id': '1', 'name': ''}

    @pytest.mark.parametrize("body", ['{}', '{"name": null}', 'null'])
    def test_update_without_name_stores_empty_name(self, make_event, body):
        response = invoke(make_event('PUT', item_id='1', body=body))

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': ''}

        response = invoke(make_event('GET', item_id='1'))
        assert json.loads(response['body']) == {'id': '1', 'name': ''}

    def test_non_string_field_is_bad_request(self, make_event, items_table):
        response = invoke(make_event('POST', body='{"id": 1, "name": "a"}'))

        assert response['statusCode'] == 400
        assert items_table.scan()['Items'] == []

    def test_base64_body(self, make_event):
        encoded = base64.b64encode(json.dumps({'id': '7', 'name': 'seven'}).encode()).decode()

        response = invoke(make_event('POST', body=encoded, isBase64Encoded=True))

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '7', 'name': 'seven'}

    def test_http_api_payload(self, make_event):
        invoke(make_event('POST', body={'id': '1', 'name': 'a'}))
        event = {
            'version': '2.0',
            'rawPath': '/items/1',
            'pathParameters': {'id': '1'},
            'requestContext': {'http': {'method': 'GET'}, 'requestId': 'v2'},
        }

        response = invoke(event)

        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': '1', 'name': 'a'}

    def test_dispatcher_built_once(self, make_event):
        with patch('items_api.lambda_function.create_table_gateway', wraps=lambda_function.create_table_gateway) as factory:
            invoke(make_event('GET'))
            invoke(make_event('GET'))
            invoke(make_event('POST', body={'id': '1', 'name': 'a'}))

        factory.assert_called_once()


def test_missing_table_returns_500(monkeypatch, mock_dynamodb_resource, make_event):
    """No table behind the configured name: the store error reaches the caller."""
    monkeypatch.setenv("DYNAMO_TABLE", "does_not_exist")
    lambda_function.reset_dispatcher()
    try:
        response = invoke(make_event('GET'))
    finally:
        lambda_function.reset_dispatcher()

    assert response['statusCode'] == 500
    assert 'ResourceNotFoundException' in response['body']


def test_missing_configuration(monkeypatch, make_event):
    monkeypatch.delenv("DYNAMO_TABLE", raising=False)
    lambda_function.reset_dispatcher()

    with pytest.raises(ConfigurationError, match="table name is required"):
        invoke(make_event('GET'))


def test_invalid_log_level_configuration(monkeypatch, make_event):
    monkeypatch.setenv("DYNAMO_TABLE", "items")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    lambda_function.reset_dispatcher()

    with pytest.raises(ConfigurationError, match="Log level must be one of"):
        invoke(make_event('GET'))
