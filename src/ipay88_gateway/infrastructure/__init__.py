"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Transport: httpx-backed and in-memory gateway transports
- Validation: rule engine executing the constraints declared by messages
- Events: in-memory synchronous event dispatcher
- Configuration and logging: environment settings, JSON log output

Infrastructure adapters implement the ports defined in the application layer.
"""

from ipay88_gateway.infrastructure.config import GatewaySettings
from ipay88_gateway.infrastructure.event_dispatcher import InMemoryEventDispatcher
from ipay88_gateway.infrastructure.http_transport import HttpxTransport
from ipay88_gateway.infrastructure.in_memory_transport import InMemoryTransport, RecordedCall
from ipay88_gateway.infrastructure.logging import configure_logging
from ipay88_gateway.infrastructure.rule_validator import RuleValidator

__all__ = [
    "GatewaySettings",
    "HttpxTransport",
    "InMemoryEventDispatcher",
    "InMemoryTransport",
    "RecordedCall",
    "RuleValidator",
    "configure_logging",
]
