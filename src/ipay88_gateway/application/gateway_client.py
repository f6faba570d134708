from __future__ import annotations

import logging
from collections.abc import Mapping
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TypeVar

from ipay88_gateway.application.validation import MessageValidationPipeline
from ipay88_gateway.domain import events
from ipay88_gateway.domain.exceptions import (
    InvalidMessageError,
    MissingCollaboratorError,
    UnexpectedTransportStatusError,
    UnpairedRequestTypeError,
    UnsupportedRequestTypeError,
)
from ipay88_gateway.domain.messages import (
    Message,
    PaymentNotifyResponseMessage,
    PaymentRequestMessage,
    PaymentResponseMessage,
    PaymentStatusRequestMessage,
    PaymentStatusResponseMessage,
)

if TYPE_CHECKING:
    from ipay88_gateway.application.ports import EventDispatcher, MessageValidator, Transport
    from ipay88_gateway.domain.value_objects import ValidationViolation

logger = logging.getLogger(__name__)

# Payment reference of the message being processed, for log correlation.
payment_reference_ctx: ContextVar[str] = ContextVar("payment_reference", default="")

MessageT = TypeVar("MessageT", bound=Message)


class GatewayClient:
    """Client of the iPay88 Online Payment Switching Gateway.

    Responsibilities:
    - Build messages from wire parameters and relate them to their pair
    - Sign outbound requests with the shared secret
    - Publish creation and violation events (when a dispatcher is set)
    - Validate messages, returning or raising violations
    - Run one request/response cycle through the transport

    Collaborators are explicit: the transport is required by send(), the
    validator by every validation, the event dispatcher is optional.
    Instances hold no per-call state; message instances are owned by the
    caller and must not be shared between concurrent writers.
    """

    def __init__(
        self,
        seller_identifier: str | None = None,
        shared_secret: str | None = None,
        *,
        transport: Transport | None = None,
        validator: MessageValidator | None = None,
        event_dispatcher: EventDispatcher | None = None,
    ) -> None:
        self.seller_identifier = seller_identifier
        self.shared_secret = shared_secret
        self.transport = transport
        self.validator = validator
        self.event_dispatcher = event_dispatcher

    # =========================================================================
    # Message creation
    # =========================================================================

    def create_message(
        self,
        message_class: type[MessageT],
        parameters: Mapping[str, Any],
        related_message: Message | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> MessageT:
        """Build, announce and validate a message.

        Args:
            message_class: Concrete message class to build.
            parameters: Wire fields (e.g. {"MerchantCode": ..., "RefNo": ...}).
            related_message: The paired message, if known.
            event_arguments: Extra arguments forwarded to the event dispatcher.
            strict: Raise instead of returning when violations are found.

        Returns:
            The message, with ``validation_violations`` filled in.

        Raises:
            InvalidAssociationError: related_message is not of the paired class.
            MissingCollaboratorError: No validator configured.
            MissingSharedSecretError: Signed message and no shared secret.
            InvalidMessageError: strict and the message has violations.
        """
        message = message_class.from_transport_mapping(parameters)
        message.related_message = related_message
        arguments = dict(event_arguments or {})

        token = payment_reference_ctx.set(message.payment_reference or "")
        try:
            logger.debug("created %s", message)
            if message.IS_REQUEST and message.message_signature is None and self.shared_secret:
                message.sign(self.shared_secret)

            if self.event_dispatcher is not None:
                self.event_dispatcher.dispatch(
                    events.MESSAGE_CREATED_EVENTS[message.VARIANT], message, arguments
                )

            self.validate_message(message, arguments, strict)
        finally:
            payment_reference_ctx.reset(token)

        return message  # type: ignore[return-value]

    def create_payment_request(
        self,
        parameters: Mapping[str, Any],
        response: PaymentResponseMessage | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> PaymentRequestMessage:
        """Build a payment request; MerchantCode defaults to the client's seller."""
        parameters = {"MerchantCode": self.seller_identifier, **parameters}
        return self.create_message(
            PaymentRequestMessage, parameters, response, event_arguments, strict
        )

    def create_payment_response(
        self,
        parameters: Mapping[str, Any],
        request: PaymentRequestMessage | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> PaymentResponseMessage:
        return self.create_message(
            PaymentResponseMessage, parameters, request, event_arguments, strict
        )

    def create_payment_notify_response(
        self,
        parameters: Mapping[str, Any],
        request: PaymentRequestMessage | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> PaymentNotifyResponseMessage:
        return self.create_message(
            PaymentNotifyResponseMessage, parameters, request, event_arguments, strict
        )

    def create_payment_status_request(
        self,
        parameters: Mapping[str, Any],
        response: PaymentStatusResponseMessage | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> PaymentStatusRequestMessage:
        parameters = {"MerchantCode": self.seller_identifier, **parameters}
        return self.create_message(
            PaymentStatusRequestMessage, parameters, response, event_arguments, strict
        )

    def create_payment_status_response(
        self,
        parameters: Mapping[str, Any],
        request: PaymentStatusRequestMessage | None = None,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> PaymentStatusResponseMessage:
        return self.create_message(
            PaymentStatusResponseMessage, parameters, request, event_arguments, strict
        )

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_message(
        self,
        message: Message,
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> list[ValidationViolation]:
        """Validate ``message`` with the client's shared secret.

        Returns:
            The violations, also attached to ``message.validation_violations``.

        Raises:
            MissingCollaboratorError: No validator configured.
            MissingSharedSecretError: Signed message and no shared secret.
            InvalidMessageError: strict and the message has violations.
        """
        if self.validator is None:
            raise MissingCollaboratorError(
                f'A message validator is required to validate the message "{message}".'
            )

        violations = MessageValidationPipeline(self.validator).run(message, self.shared_secret)
        if not violations:
            return violations

        logger.warning(
            "%s has validation violations: %s",
            message,
            "; ".join(str(violation) for violation in violations),
        )
        if self.event_dispatcher is not None:
            self.event_dispatcher.dispatch(
                events.MESSAGE_VALIDATION_VIOLATIONS, message, dict(event_arguments or {})
            )
        if strict:
            raise InvalidMessageError(message)
        return violations

    # =========================================================================
    # Request/response cycle
    # =========================================================================

    def send(
        self,
        request_class: type[Message],
        parameters: Mapping[str, Any],
        event_arguments: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> Message:
        """Send a request to the gateway and return its validated response.

        Steps: build and validate the request, dispatch it through the
        transport, check the HTTP status, rebuild the paired response from
        the body and validate it.

        Raises:
            UnsupportedRequestTypeError: request_class is not a request.
            UnpairedRequestTypeError: request_class declares no response class.
            MissingCollaboratorError: No transport (or validator) configured.
            InvalidMessageError: strict and request or response is invalid;
                an invalid request is never sent.
            UnexpectedTransportStatusError: The gateway did not answer 200.
        """
        if not request_class.IS_REQUEST:
            raise UnsupportedRequestTypeError(
                f'The request class "{request_class.__name__}" must be a request message.'
            )
        response_class = request_class.paired_message_class()
        if response_class is None:
            raise UnpairedRequestTypeError(
                f'The request class "{request_class.__name__}" must be related to a response class.'
            )
        if self.transport is None:
            raise MissingCollaboratorError(
                f'A transport is required to send "{request_class.__name__}" messages.'
            )

        arguments = dict(event_arguments or {})
        if "MerchantCode" not in parameters and self.seller_identifier is not None:
            parameters = {"MerchantCode": self.seller_identifier, **parameters}
        request = self.create_message(request_class, parameters, None, arguments, strict)

        token = payment_reference_ctx.set(request.payment_reference or "")
        try:
            logger.info(
                "sending %s %s %s", request, request.message_http_method, request.message_url
            )
            transport_response = self.transport.execute(
                request.message_http_method or request.HTTP_METHOD,
                request.message_url or "",
                request.to_transport_mapping(),
            )
            logger.info("%s answered with HTTP %s", request, transport_response.status_code)
        finally:
            payment_reference_ctx.reset(token)

        if not transport_response.is_success:
            raise UnexpectedTransportStatusError(
                transport_response.status_code, transport_response.reason_phrase
            )

        return self.create_message(
            response_class,
            response_class.mapping_from_body(transport_response.body),
            request,
            {**arguments, "transport_response": transport_response},
            strict,
        )
