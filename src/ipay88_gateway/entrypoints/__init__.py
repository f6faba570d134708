"""Entrypoints layer - Wiring of the gateway client.

Entrypoints assemble the application services with their infrastructure
adapters from the runtime configuration.
"""

from ipay88_gateway.entrypoints.factory import create_gateway_client

__all__ = ["create_gateway_client"]
