"""Names of the events published to the optional event dispatcher."""

from __future__ import annotations

from ipay88_gateway.domain.messages.variants import MessageVariant

MESSAGE_VALIDATION_VIOLATIONS = "ipay88.message_validation_violations"
PAYMENT_NOTIFY_RESPONSE = "ipay88.payment_notify_response"
PAYMENT_REQUEST = "ipay88.payment_request"
PAYMENT_RESPONSE = "ipay88.payment_response"
PAYMENT_STATUS_REQUEST = "ipay88.payment_status_request"
PAYMENT_STATUS_RESPONSE = "ipay88.payment_status_response"

# Published when a message of the given variant is created.
MESSAGE_CREATED_EVENTS: dict[MessageVariant, str] = {
    MessageVariant.PAYMENT_REQUEST: PAYMENT_REQUEST,
    MessageVariant.PAYMENT_RESPONSE: PAYMENT_RESPONSE,
    MessageVariant.PAYMENT_NOTIFY_RESPONSE: PAYMENT_NOTIFY_RESPONSE,
    MessageVariant.PAYMENT_STATUS_REQUEST: PAYMENT_STATUS_REQUEST,
    MessageVariant.PAYMENT_STATUS_RESPONSE: PAYMENT_STATUS_RESPONSE,
}
