"""
Request Dispatcher

Routes a gateway request to one of the five item operations by HTTP method
and ``id`` path parameter, and renders the outcome as a gateway response:

    POST            -> create
    GET    (no id)  -> list all
    GET    (id)     -> read one
    PUT    (id)     -> update
    DELETE (id)     -> delete
    anything else   -> 405, empty body

Errors raised by the operations become plain-text responses; each error
carries its own status code and body.
"""

import logging

from ..codec import dump_item, dump_items
from ..core import TableGateway
from ..exceptions import ItemsApiError
from ..models import GatewayRequest, GatewayResponse
from .items import ItemsReadApi, ItemsWriteApi

logger = logging.getLogger(__name__)


class ItemsDispatcher:
    """Maps (method, id) to an items API call."""

    def __init__(self, read_api: ItemsReadApi, write_api: ItemsWriteApi):
        self.read_api = read_api
        self.write_api = write_api

    def dispatch(self, request: GatewayRequest) -> GatewayResponse:
        """
        Handle one request.

        Args:
            request: Parsed gateway request

        Returns:
            Response for the gateway; never raises for request-level errors
        """
        method = request.http_method.upper()
        item_id = request.item_id
        logger.info(f"{method} /items{'/' + item_id if item_id else ''} (request: {request.request_id})")

        try:
            if method == 'POST':
                return self.create(request)
            if method == 'GET':
                if not item_id:
                    return self.read_all()
                return self.read_one(item_id)
            if method == 'PUT':
                return self.update(item_id, request)
            if method == 'DELETE':
                return self.delete(item_id)
        except ItemsApiError as e:
            logger.info(f"{method} failed with {e.status_code}: {e!r}")
            return GatewayResponse.with_text(e.status_code, e.response_body)

        logger.warning(f"Method not allowed: {method!r}")
        return GatewayResponse.empty(405)

    def create(self, request: GatewayRequest) -> GatewayResponse:
        item = self.write_api.create(request.decoded_body())
        return GatewayResponse.with_json(200, dump_item(item))

    def read_all(self) -> GatewayResponse:
        items = self.read_api.list_all()
        return GatewayResponse.with_json(200, dump_items(items))

    def read_one(self, item_id: str) -> GatewayResponse:
        item = self.read_api.get_by_id(item_id)
        return GatewayResponse.with_json(200, dump_item(item))

    def update(self, item_id: str, request: GatewayRequest) -> GatewayResponse:
        item = self.write_api.update(item_id, request.decoded_body())
        return GatewayResponse.with_json(200, dump_item(item))

    def delete(self, item_id: str) -> GatewayResponse:
        self.write_api.delete(item_id)
        return GatewayResponse.with_text(200, f"Deleted item {item_id}")


def create_dispatcher(gateway: TableGateway) -> ItemsDispatcher:
    """Build a dispatcher whose read and write APIs share ``gateway``."""
    return ItemsDispatcher(ItemsReadApi(gateway), ItemsWriteApi(gateway))
