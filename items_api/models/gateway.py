"""
API Gateway Proxy Envelope

Models for the request event the Lambda runtime delivers and the response
dict it expects back. Both the REST API (payload 1.0) and HTTP API
(payload 2.0) proxy formats are read; responses are always written in the
shape both accept.
"""

import base64
import binascii
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..exceptions import BadRequestError

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


class GatewayRequest(BaseModel):
    """The parts of a proxy event the dispatcher routes on."""

    http_method: str = Field(..., description="Upper-cased HTTP method")
    path_parameters: Dict[str, str] = Field(default_factory=dict, description="Path parameters, e.g. {'id': '1'}")
    body: str = Field(default="", description="Raw request body")
    is_base64_encoded: bool = Field(default=False, description="Whether the body is base64 encoded")
    request_id: Optional[str] = Field(None, description="API Gateway request id")

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> 'GatewayRequest':
        """
        Build a request from an API Gateway proxy event.

        Args:
            event: Proxy event as delivered to the Lambda handler

        Returns:
            GatewayRequest with absent fields normalised to empty values
        """
        request_context = event.get('requestContext') or {}
        method = event.get('httpMethod') or (request_context.get('http') or {}).get('method') or ''

        return cls(
            http_method=method.upper(),
            path_parameters=event.get('pathParameters') or {},
            body=event.get('body') or '',
            is_base64_encoded=bool(event.get('isBase64Encoded')),
            request_id=request_context.get('requestId'),
        )

    @property
    def item_id(self) -> str:
        """The ``id`` path parameter, or an empty string when absent."""
        return self.path_parameters.get('id') or ''

    def decoded_body(self) -> str:
        """
        Return the body as text, decoding base64 when the gateway encoded it.

        Raises:
            BadRequestError: If the body is not valid base64 or not UTF-8
        """
        if not self.is_base64_encoded:
            return self.body
        try:
            return base64.b64decode(self.body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise BadRequestError(f"Invalid base64 request body: {e}", original_error=e) from e


class GatewayResponse(BaseModel):
    """A proxy integration response."""

    status_code: int
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def with_json(cls, status_code: int, body: str) -> 'GatewayResponse':
        return cls(status_code=status_code, body=body, headers={'Content-Type': JSON_CONTENT_TYPE})

    @classmethod
    def with_text(cls, status_code: int, body: str) -> 'GatewayResponse':
        return cls(status_code=status_code, body=body, headers={'Content-Type': TEXT_CONTENT_TYPE})

    @classmethod
    def empty(cls, status_code: int) -> 'GatewayResponse':
        return cls(status_code=status_code)

    def to_dict(self) -> Dict[str, Any]:
        """Render the response dict returned to the Lambda runtime."""
        return {
            'statusCode': self.status_code,
            'headers': dict(self.headers),
            'body': self.body,
            'isBase64Encoded': False,
        }
