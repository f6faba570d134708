from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ipay88_gateway.application.gateway_client import GatewayClient
from ipay88_gateway.infrastructure.config import GatewaySettings
from ipay88_gateway.infrastructure.http_transport import HttpxTransport
from ipay88_gateway.infrastructure.logging import configure_logging
from ipay88_gateway.infrastructure.rule_validator import RuleValidator

if TYPE_CHECKING:
    from ipay88_gateway.application.ports import EventDispatcher, MessageValidator, Transport

logger = logging.getLogger(__name__)


def create_gateway_client(
    settings: GatewaySettings | None = None,
    *,
    transport: Transport | None = None,
    validator: MessageValidator | None = None,
    event_dispatcher: EventDispatcher | None = None,
) -> GatewayClient:
    """Build a GatewayClient wired with the production adapters.

    The package logger is configured at ``settings.log_level``.

    Args:
        settings: Client configuration; read from the environment when omitted.
        transport: Overrides the default HttpxTransport.
        validator: Overrides the default RuleValidator.
        event_dispatcher: Optional event dispatcher; none by default.

    Returns:
        A client ready to create, validate and send messages.
    """
    if settings is None:
        settings = GatewaySettings()

    configure_logging(settings.log_level)

    if transport is None:
        transport = HttpxTransport(timeout=settings.request_timeout_seconds)

    client = GatewayClient(
        settings.seller_identifier,
        settings.shared_secret_value(),
        transport=transport,
        validator=validator if validator is not None else RuleValidator(),
        event_dispatcher=event_dispatcher,
    )
    logger.debug("gateway client created for seller %s", settings.seller_identifier)
    return client
