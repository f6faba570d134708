"""Tests for GatewayClient.

Tests cover:
- Message creation: signing, relating, events, validation
- Strict mode raising InvalidMessageError
- Request/response cycle through the transport
- Type and collaborator checks before any transport call
- Log output for validation violations
"""

import hashlib
import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import urlencode

import pytest

from ipay88_gateway.application.gateway_client import GatewayClient
from ipay88_gateway.domain import events
from ipay88_gateway.domain.exceptions import (
    InvalidAssociationError,
    InvalidMessageError,
    MissingCollaboratorError,
    MissingSharedSecretError,
    UnexpectedTransportStatusError,
    UnpairedRequestTypeError,
    UnsupportedRequestTypeError,
)
from ipay88_gateway.domain.messages import (
    Message,
    PaymentRequestMessage,
    PaymentResponseMessage,
    PaymentStatusRequestMessage,
    PaymentStatusResponseMessage,
)
from ipay88_gateway.infrastructure.event_dispatcher import InMemoryEventDispatcher
from ipay88_gateway.infrastructure.in_memory_transport import InMemoryTransport
from ipay88_gateway.infrastructure.rule_validator import RuleValidator

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def dispatched(event_dispatcher: InMemoryEventDispatcher) -> list[tuple[str, Message, Mapping[str, Any]]]:
    """Every event published to the dispatcher, in order."""
    records: list[tuple[str, Message, Mapping[str, Any]]] = []

    def record(event_name: str, message: Message, arguments: Mapping[str, Any]) -> None:
        records.append((event_name, message, arguments))

    for event_name in (*events.MESSAGE_CREATED_EVENTS.values(), events.MESSAGE_VALIDATION_VIOLATIONS):
        event_dispatcher.add_listener(event_name, record)
    return records


@pytest.fixture
def status_request_parameters() -> dict[str, Any]:
    return {"RefNo": "REF1", "Amount": "100.00"}


class UnpairedStatusRequestMessage(PaymentStatusRequestMessage):
    @classmethod
    def paired_message_class(cls) -> None:  # type: ignore[override]
        return None


def _event_names(dispatched: list[tuple[str, Message, Mapping[str, Any]]]) -> list[str]:
    return [event_name for event_name, _, _ in dispatched]


# =============================================================================
# Message Creation Tests
# =============================================================================


class TestCreateMessage:
    """Test building, signing and validating messages."""

    def test_request_is_signed_with_client_secret(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
        shared_secret: str,
    ) -> None:
        request = client.create_payment_request(payment_request_parameters)

        expected = hashlib.sha256(
            f"{shared_secret}M001REF110000MYR".encode("utf-8")
        ).hexdigest()
        assert request.message_signature == expected
        assert request.validation_violations == []

    def test_request_without_signature_type_is_not_signed(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        del payment_request_parameters["SignatureType"]

        request = client.create_payment_request(payment_request_parameters)

        assert request.message_signature is None
        assert "Signature" not in request.to_transport_mapping()
        assert [(v.field, v.code) for v in request.validation_violations] == [
            ("signature_type", "NOT_BLANK")
        ]

    def test_request_defaults_seller_to_client_seller(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        del payment_request_parameters["MerchantCode"]

        request = client.create_payment_request(payment_request_parameters)

        assert request.seller_identifier == "M001"

    def test_explicit_seller_wins(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request({**payment_request_parameters, "MerchantCode": "M002"})

        assert request.seller_identifier == "M002"

    def test_provided_request_signature_is_kept(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request({**payment_request_parameters, "Signature": "forged"})

        assert request.message_signature == "forged"
        assert [v.code for v in request.validation_violations] == ["SIGNATURE_MISMATCH"]

    def test_response_is_not_signed_by_client(
        self,
        client: GatewayClient,
        payment_response_parameters: dict[str, Any],
    ) -> None:
        parameters = {**payment_response_parameters}
        del parameters["Signature"]

        response = client.create_payment_response(parameters)

        assert response.message_signature is None
        assert [v.code for v in response.validation_violations] == ["NOT_BLANK"]

    def test_valid_response_with_related_request(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
        payment_response_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request(payment_request_parameters)

        response = client.create_payment_response(payment_response_parameters, request)

        assert response.related_message is request
        assert response.is_succeeded()
        assert response.validation_violations == []

    def test_notify_response(
        self,
        client: GatewayClient,
        payment_response_parameters: dict[str, Any],
    ) -> None:
        response = client.create_payment_notify_response(payment_response_parameters)

        assert response.validation_violations == []

    def test_wrong_related_message_raises(
        self,
        client: GatewayClient,
        payment_response_parameters: dict[str, Any],
    ) -> None:
        with pytest.raises(InvalidAssociationError):
            client.create_message(
                PaymentResponseMessage,
                payment_response_parameters,
                PaymentStatusRequestMessage(),
            )

    def test_status_response_from_status_message(self, client: GatewayClient) -> None:
        response = client.create_payment_status_response({"PaymentStatusMessage": "Incorrect amount"})

        assert response.is_errored()
        assert response.validation_violations == []

    def test_status_request_needs_no_signature(
        self,
        client: GatewayClient,
        status_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_status_request(status_request_parameters)

        assert request.message_signature is None
        assert request.seller_identifier == "M001"
        assert request.payment_amount == Decimal("100.00")
        assert request.validation_violations == []

    def test_invalid_message_is_returned_with_violations(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request({**payment_request_parameters, "UserEmail": "nope"})

        assert [(v.field, v.code) for v in request.validation_violations] == [
            ("customer_email", "EMAIL")
        ]


# =============================================================================
# Strict Mode Tests
# =============================================================================


class TestStrictMode:
    """Test strict mode raises on violations."""

    def test_strict_invalid_message_raises(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        with pytest.raises(InvalidMessageError) as exc_info:
            client.create_payment_request({**payment_request_parameters, "Amount": "ten"}, strict=True)

        assert isinstance(exc_info.value.gateway_message, PaymentRequestMessage)
        assert [v.code for v in exc_info.value.violations] == ["NUMERIC"]

    def test_strict_valid_message_is_returned(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request(payment_request_parameters, strict=True)

        assert request.validation_violations == []

    def test_validate_message_directly(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        request = client.create_payment_request(payment_request_parameters)
        request.payment_amount = Decimal("50")

        violations = client.validate_message(request)

        assert [v.field for v in violations] == ["message_signature"]
        with pytest.raises(InvalidMessageError):
            client.validate_message(request, strict=True)


# =============================================================================
# Event Tests
# =============================================================================


class TestEvents:
    """Test events published to the dispatcher."""

    def test_creation_event_is_published(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
        dispatched: list[tuple[str, Message, Mapping[str, Any]]],
    ) -> None:
        request = client.create_payment_request(payment_request_parameters, event_arguments={"order": 7})

        assert dispatched == [(events.PAYMENT_REQUEST, request, {"order": 7})]

    def test_violation_event_follows_creation_event(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
        dispatched: list[tuple[str, Message, Mapping[str, Any]]],
    ) -> None:
        client.create_payment_request({**payment_request_parameters, "UserName": ""})

        assert _event_names(dispatched) == [
            events.PAYMENT_REQUEST,
            events.MESSAGE_VALIDATION_VIOLATIONS,
        ]

    def test_creation_event_sees_signed_request(
        self,
        client: GatewayClient,
        event_dispatcher: InMemoryEventDispatcher,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        signatures: list[str | None] = []
        event_dispatcher.add_listener(
            events.PAYMENT_REQUEST,
            lambda event_name, message, arguments: signatures.append(message.message_signature),
        )

        client.create_payment_request(payment_request_parameters)

        assert signatures[0] is not None

    def test_client_without_dispatcher_publishes_nothing(
        self,
        validator: RuleValidator,
        payment_request_parameters: dict[str, Any],
        shared_secret: str,
    ) -> None:
        client = GatewayClient("M001", shared_secret, validator=validator)

        request = client.create_payment_request({**payment_request_parameters, "UserName": ""})

        assert request.has_validation_violations()

    def test_violations_are_logged(
        self,
        client: GatewayClient,
        payment_request_parameters: dict[str, Any],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.set_level(logging.WARNING, logger="ipay88_gateway")

        client.create_payment_request({**payment_request_parameters, "UserName": ""})

        assert "customer_name" in caplog.text
        assert "Payment request REF1" in caplog.text


# =============================================================================
# Missing Collaborator Tests
# =============================================================================


class TestMissingCollaborators:
    """Test configuration errors surface before any transport call."""

    def test_missing_validator(
        self,
        transport: InMemoryTransport,
        payment_request_parameters: dict[str, Any],
        shared_secret: str,
    ) -> None:
        client = GatewayClient("M001", shared_secret, transport=transport)

        with pytest.raises(MissingCollaboratorError):
            client.create_payment_request(payment_request_parameters)
        assert transport.calls == []

    def test_missing_transport(
        self,
        validator: RuleValidator,
        payment_request_parameters: dict[str, Any],
        shared_secret: str,
    ) -> None:
        client = GatewayClient("M001", shared_secret, validator=validator)

        with pytest.raises(MissingCollaboratorError):
            client.send(PaymentRequestMessage, payment_request_parameters)

    def test_missing_shared_secret(
        self,
        validator: RuleValidator,
        transport: InMemoryTransport,
        payment_request_parameters: dict[str, Any],
    ) -> None:
        client = GatewayClient("M001", transport=transport, validator=validator)

        with pytest.raises(MissingSharedSecretError):
            client.send(PaymentRequestMessage, payment_request_parameters)
        assert transport.calls == []

    def test_status_request_works_without_secret(
        self,
        validator: RuleValidator,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
    ) -> None:
        client = GatewayClient("M001", transport=transport, validator=validator)
        transport.queue("00")

        response = client.send(PaymentStatusRequestMessage, status_request_parameters)

        assert response.validation_violations == []


# =============================================================================
# Send Tests
# =============================================================================


class TestSend:
    """Test one request/response cycle."""

    def test_status_enquiry_round_trip(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
        dispatched: list[tuple[str, Message, Mapping[str, Any]]],
    ) -> None:
        transport.queue("00")

        response = client.send(PaymentStatusRequestMessage, status_request_parameters)

        assert isinstance(response, PaymentStatusResponseMessage)
        assert response.is_succeeded()
        assert response.validation_violations == []
        assert isinstance(response.related_message, PaymentStatusRequestMessage)
        assert response.related_message.payment_reference == "REF1"
        assert _event_names(dispatched) == [
            events.PAYMENT_STATUS_REQUEST,
            events.PAYMENT_STATUS_RESPONSE,
        ]

    def test_request_is_posted_as_wire_fields(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
    ) -> None:
        transport.queue("00")

        client.send(PaymentStatusRequestMessage, {**status_request_parameters, "Amount": "1,234.50"})

        [call] = transport.calls
        assert call.method == "POST"
        assert call.url == "https://www.mobile88.com/epayment/enquiry.asp"
        assert call.form_body == {"MerchantCode": "M001", "RefNo": "REF1", "Amount": "1,234.50"}

    def test_payment_request_round_trip(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        payment_request_parameters: dict[str, Any],
        payment_response_parameters: dict[str, Any],
    ) -> None:
        transport.queue(urlencode(payment_response_parameters))

        response = client.send(PaymentRequestMessage, payment_request_parameters)

        assert isinstance(response, PaymentResponseMessage)
        assert response.is_succeeded()
        assert response.validation_violations == []
        assert transport.calls[0].form_body["Signature"] == response.related_message.message_signature  # type: ignore[union-attr]

    def test_response_event_carries_transport_response(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
        dispatched: list[tuple[str, Message, Mapping[str, Any]]],
    ) -> None:
        transport.queue("00")

        client.send(PaymentStatusRequestMessage, status_request_parameters, {"order": 7})

        _, _, arguments = dispatched[-1]
        assert arguments["order"] == 7
        assert arguments["transport_response"].body == "00"

    def test_non_success_status_raises_before_response_is_built(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
        dispatched: list[tuple[str, Message, Mapping[str, Any]]],
    ) -> None:
        transport.queue("", status_code=500, reason_phrase="Internal Server Error")

        with pytest.raises(UnexpectedTransportStatusError) as exc_info:
            client.send(PaymentStatusRequestMessage, status_request_parameters)

        assert exc_info.value.status_code == 500
        assert "Internal Server Error" in str(exc_info.value)
        assert _event_names(dispatched) == [events.PAYMENT_STATUS_REQUEST]

    def test_invalid_response_is_returned_with_violations(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
    ) -> None:
        transport.queue("   ")

        response = client.send(PaymentStatusRequestMessage, status_request_parameters)

        assert [v.code for v in response.validation_violations] == ["NOT_BLANK"]

    def test_strict_invalid_request_is_never_sent(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
        status_request_parameters: dict[str, Any],
    ) -> None:
        with pytest.raises(InvalidMessageError):
            client.send(
                PaymentStatusRequestMessage,
                {**status_request_parameters, "RefNo": "R" * 31},
                strict=True,
            )

        assert transport.calls == []

    def test_response_class_is_rejected(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
    ) -> None:
        with pytest.raises(UnsupportedRequestTypeError):
            client.send(PaymentResponseMessage, {})

        assert transport.calls == []

    def test_unpaired_request_class_is_rejected(
        self,
        client: GatewayClient,
        transport: InMemoryTransport,
    ) -> None:
        with pytest.raises(UnpairedRequestTypeError):
            client.send(UnpairedStatusRequestMessage, {})

        assert transport.calls == []
