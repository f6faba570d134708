"""Static variant -> message class table."""

from __future__ import annotations

from ipay88_gateway.domain.messages.base import Message
from ipay88_gateway.domain.messages.payment_request import PaymentRequestMessage
from ipay88_gateway.domain.messages.payment_response import (
    PaymentNotifyResponseMessage,
    PaymentResponseMessage,
)
from ipay88_gateway.domain.messages.payment_status import (
    PaymentStatusRequestMessage,
    PaymentStatusResponseMessage,
)
from ipay88_gateway.domain.messages.variants import MessageVariant

MESSAGE_CLASSES: dict[MessageVariant, type[Message]] = {
    MessageVariant.PAYMENT_REQUEST: PaymentRequestMessage,
    MessageVariant.PAYMENT_RESPONSE: PaymentResponseMessage,
    MessageVariant.PAYMENT_NOTIFY_RESPONSE: PaymentNotifyResponseMessage,
    MessageVariant.PAYMENT_STATUS_REQUEST: PaymentStatusRequestMessage,
    MessageVariant.PAYMENT_STATUS_RESPONSE: PaymentStatusResponseMessage,
}


def message_class_for(variant: MessageVariant) -> type[Message]:
    return MESSAGE_CLASSES[variant]
