"""Domain layer - Protocol rules of the iPay88 payment gateway.

This layer contains:
- Field catalog: static lookup tables (currencies, payment methods, statuses)
- Messages: request/response variants, their wire mapping and constraints
- Signature: keyed hashing of the signature-critical fields
- Domain Exceptions: the client error taxonomy

The domain layer has no dependency on transports or dispatchers.
"""
