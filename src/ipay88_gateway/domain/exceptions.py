"""Exceptions raised by the iPay88 gateway client.

Exception hierarchy:
    GatewayException (base)
    ├── ConfigurationError
    │   ├── MissingSharedSecretError
    │   └── MissingCollaboratorError
    ├── MessageValidationError
    │   └── InvalidMessageError (strict mode only)
    ├── ProtocolTypeError
    │   ├── InvalidAssociationError
    │   ├── UnsupportedRequestTypeError
    │   └── UnpairedRequestTypeError
    ├── TransportError
    │   └── UnexpectedTransportStatusError
    └── CatalogLookupError
        └── UnknownCatalogEntryError

A signature mismatch is NOT an exception: it is reported as a validation
violation with the SIGNATURE_MISMATCH code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ipay88_gateway.domain.messages.base import Message
    from ipay88_gateway.domain.value_objects.violation import ValidationViolation


class GatewayException(Exception):
    """Base exception for all gateway client errors."""


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GatewayException):
    """Raised when the client is not set up to perform an operation.

    Always surfaced before any transport call and never worth retrying.
    """


class MissingSharedSecretError(ConfigurationError):
    """Raised when a signed message is validated without the shared secret."""


class MissingCollaboratorError(ConfigurationError):
    """Raised when a required collaborator (transport, validator) is absent."""


# =============================================================================
# Validation Errors
# =============================================================================


class MessageValidationError(GatewayException):
    """Base class for recoverable message validation failures."""


class InvalidMessageError(MessageValidationError):
    """Raised in strict mode when a message has validation violations.

    Non-strict callers get the same violations as data on
    ``message.validation_violations`` instead.
    """

    def __init__(self, gateway_message: Message) -> None:
        super().__init__(
            f"{gateway_message} is invalid and was not processed by "
            "iPay88 Online Payment Switching Gateway."
        )
        self.gateway_message = gateway_message

    @property
    def violations(self) -> list[ValidationViolation]:
        return self.gateway_message.validation_violations


# =============================================================================
# Protocol Type Errors
# =============================================================================


class ProtocolTypeError(GatewayException):
    """Base class for caller programming errors about message classes."""


class InvalidAssociationError(ProtocolTypeError):
    """Raised when a related message is not of the paired variant class."""


class UnsupportedRequestTypeError(ProtocolTypeError):
    """Raised when send() receives a class that is not request-capable."""


class UnpairedRequestTypeError(ProtocolTypeError):
    """Raised when send() receives a request class without a paired response."""


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(GatewayException):
    """Base class for failures reported by the transport collaborator."""


class UnexpectedTransportStatusError(TransportError):
    """Raised when the gateway answers with a non-success HTTP status.

    No retry is attempted; the caller decides whether to send again.
    """

    def __init__(self, status_code: int, reason_phrase: str | None = None) -> None:
        super().__init__(
            "The HTTP response received from iPay88 Online Payment Switching "
            f'Gateway is invalid: "{reason_phrase or status_code}".'
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogLookupError(GatewayException):
    """Base class for failed field catalog lookups."""


class UnknownCatalogEntryError(CatalogLookupError, KeyError):
    """Raised when a key is absent from a field catalog category."""

    def __init__(self, category: str, key: object) -> None:
        super().__init__(
            f'The {category} "{key}" is not supported by iPay88 Online '
            "Payment Switching Gateway."
        )
        self.category = category
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
