"""
Domain-Specific Exceptions for the Items API

Every request-level failure maps onto exactly one HTTP status:

1. Request Errors (400)
2. Resource Not Found Errors (404)
3. Store Errors (500)

Configuration errors are raised at startup and never rendered as a response.
"""

from typing import Any, Dict, Optional

from .base import ItemsApiError


# =============================================================================
# Request Errors
# =============================================================================

class BadRequestError(ItemsApiError):
    """Raised when a request body cannot be decoded into the expected shape.

    Used for:
    - Bodies that are not valid JSON
    - JSON that does not match the item shape
    - Base64 bodies that cannot be decoded
    """

    status_code = 400

    def __init__(self, message: str, errors: Optional[list] = None, original_error: Optional[Exception] = None):
        """Initialize bad request error.

        Args:
            message: Raw parser error text, returned verbatim to the caller
            errors: Field-level errors reported by the parser
            original_error: The original exception that caused this error
        """
        self.errors = errors or []
        super().__init__(message, original_error)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class ItemNotFoundError(ItemsApiError):
    """Raised when a lookup by id finds no item.

    The caller only ever sees a fixed body; the table and key stay in the
    message for logs.
    """

    status_code = 404
    response_body = "Item not found"

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Store Errors
# =============================================================================

class StoreError(ItemsApiError):
    """Raised when a call to DynamoDB fails for any reason.

    Used for:
    - Throttling and capacity errors
    - Authentication/authorization failures
    - Missing tables and DynamoDB validation failures
    - Network, endpoint and credential errors raised by botocore
    - Stored records that cannot be decoded into an item

    The message is the underlying error text, unchanged.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        operation: Optional[str] = None,
        table_name: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize store error.

        Args:
            message: Underlying error text
            error_code: DynamoDB error code, when the store returned one
            operation: The DynamoDB operation that failed (e.g. "PutItem")
            table_name: The DynamoDB table name
            original_error: The original exception that caused this error
        """
        self.error_code = error_code
        self.operation = operation
        self.table_name = table_name
        context: Dict[str, Any] = {}
        if error_code:
            context['error_code'] = error_code
        if operation:
            context['operation'] = operation
        if table_name:
            context['table_name'] = table_name
        super().__init__(message, original_error, context)


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(ItemsApiError):
    """Raised when the process configuration is invalid or incomplete."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, original_error)
