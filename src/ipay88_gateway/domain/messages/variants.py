"""Closed set of message variants and their static pairing."""

from __future__ import annotations

from enum import Enum


class MessageVariant(Enum):
    PAYMENT_REQUEST = "payment_request"
    PAYMENT_RESPONSE = "payment_response"
    PAYMENT_NOTIFY_RESPONSE = "payment_notify_response"
    PAYMENT_STATUS_REQUEST = "payment_status_request"
    PAYMENT_STATUS_RESPONSE = "payment_status_response"


PAIRED_VARIANTS: dict[MessageVariant, MessageVariant] = {
    MessageVariant.PAYMENT_REQUEST: MessageVariant.PAYMENT_RESPONSE,
    MessageVariant.PAYMENT_RESPONSE: MessageVariant.PAYMENT_REQUEST,
    MessageVariant.PAYMENT_NOTIFY_RESPONSE: MessageVariant.PAYMENT_REQUEST,
    MessageVariant.PAYMENT_STATUS_REQUEST: MessageVariant.PAYMENT_STATUS_RESPONSE,
    MessageVariant.PAYMENT_STATUS_RESPONSE: MessageVariant.PAYMENT_STATUS_REQUEST,
}
