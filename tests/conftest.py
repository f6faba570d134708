"""Shared pytest fixtures for the test suite."""

import hashlib
from typing import Any

import pytest

from ipay88_gateway.application.gateway_client import GatewayClient
from ipay88_gateway.infrastructure.event_dispatcher import InMemoryEventDispatcher
from ipay88_gateway.infrastructure.in_memory_transport import InMemoryTransport
from ipay88_gateway.infrastructure.rule_validator import RuleValidator

SHARED_SECRET = "secret123"
SELLER_IDENTIFIER = "M001"


def sha256_hex(payload: str) -> str:
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


@pytest.fixture
def shared_secret() -> str:
    return SHARED_SECRET


@pytest.fixture
def seller_identifier() -> str:
    return SELLER_IDENTIFIER


@pytest.fixture
def payment_request_parameters() -> dict[str, Any]:
    """Wire fields of a complete, valid payment request (unsigned)."""
    return {
        "MerchantCode": SELLER_IDENTIFIER,
        "RefNo": "REF1",
        "Amount": "100.00",
        "Currency": "MYR",
        "PaymentId": "2",
        "ProdDesc": "Photo prints",
        "UserName": "Jane Doe",
        "UserEmail": "jane.doe@gmail.com",
        "UserContact": "0123456789",
        "Lang": "UTF-8",
        "SignatureType": "SHA256",
        "ResponseURL": "https://shop.example.com/payment/return",
        "BackendURL": "https://shop.example.com/payment/notify",
    }


@pytest.fixture
def payment_response_parameters() -> dict[str, Any]:
    """Wire fields of a succeeded payment response, correctly signed."""
    return {
        "MerchantCode": SELLER_IDENTIFIER,
        "PaymentId": "2",
        "RefNo": "REF1",
        "Amount": "100.00",
        "Currency": "MYR",
        "Remark": "",
        "TransId": "T0012345600",
        "AuthCode": "123456",
        "Status": "1",
        "ErrDesc": "",
        "CCNo": "123456xxxxxx7890",
        "Signature": sha256_hex(SHARED_SECRET + SELLER_IDENTIFIER + "2" + "REF1" + "10000" + "MYR" + "1"),
    }


@pytest.fixture
def validator() -> RuleValidator:
    return RuleValidator()


@pytest.fixture
def event_dispatcher() -> InMemoryEventDispatcher:
    return InMemoryEventDispatcher()


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def client(
    validator: RuleValidator,
    event_dispatcher: InMemoryEventDispatcher,
    transport: InMemoryTransport,
) -> GatewayClient:
    """A fully wired client using in-memory adapters."""
    return GatewayClient(
        SELLER_IDENTIFIER,
        SHARED_SECRET,
        transport=transport,
        validator=validator,
        event_dispatcher=event_dispatcher,
    )
