"""Collaborators the gateway client talks to.

- Transport: posts a message to the gateway and returns its HTTP answer
- MessageValidator: runs the constraints a message class declares
- EventDispatcher: optional sink for creation and violation events
"""

from ipay88_gateway.application.ports.event_dispatcher import EventDispatcher
from ipay88_gateway.application.ports.message_validator import MessageValidator
from ipay88_gateway.application.ports.transport import HTTP_OK, Transport, TransportResponse

__all__ = [
    "HTTP_OK",
    "EventDispatcher",
    "MessageValidator",
    "Transport",
    "TransportResponse",
]
