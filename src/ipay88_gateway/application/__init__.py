"""Application layer - Orchestration and port definitions.

This layer contains:
- GatewayClient: creates, validates, sends and receives messages
- MessageValidationPipeline: ordered two-phase validation plus signature check
- Ports: Abstract interfaces (transport, validator, event dispatcher)

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
