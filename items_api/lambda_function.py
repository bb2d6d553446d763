"""
AWS Lambda entry point.

Configure the function handler as ``items_api.lambda_function.handler``. The
table gateway and dispatcher are built on the first invocation and reused by
every later invocation in the same execution environment.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import DynamoDBConfig
from .core import create_table_gateway
from .exceptions import ConfigurationError
from .handlers import ItemsDispatcher, create_dispatcher
from .models import GatewayRequest

logger = logging.getLogger(__name__)

_dispatcher: Optional[ItemsDispatcher] = None


def configure_logging(config: DynamoDBConfig) -> None:
    """Apply the configured log level to the root logger.

    The Lambda runtime installs its own root handler; a handler is only
    added when none exists (local runs).
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(config.effective_log_level)

    # botocore is very chatty at DEBUG
    if not config.enable_debug_logging:
        logging.getLogger('botocore').setLevel(logging.WARNING)


def get_dispatcher() -> ItemsDispatcher:
    """Return the process-wide dispatcher, building it on first use.

    Raises:
        ConfigurationError: If the environment does not hold a valid configuration
    """
    global _dispatcher
    if _dispatcher is None:
        try:
            config = DynamoDBConfig.from_env()
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", e) from e

        configure_logging(config)
        gateway = create_table_gateway(config)
        _dispatcher = create_dispatcher(gateway)
        logger.info(f"Initialized items dispatcher for table {gateway.table_name}")
    return _dispatcher


def reset_dispatcher() -> None:
    """Drop the cached dispatcher so the next invocation rebuilds it."""
    global _dispatcher
    _dispatcher = None


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Handle one API Gateway proxy event."""
    request = GatewayRequest.from_event(event)
    response = get_dispatcher().dispatch(request)
    return response.to_dict()
