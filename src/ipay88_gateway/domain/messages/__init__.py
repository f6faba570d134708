"""Message model - the variants exchanged with the gateway."""

from ipay88_gateway.domain.messages.base import Message
from ipay88_gateway.domain.messages.payment import PaymentMessage
from ipay88_gateway.domain.messages.payment_request import PaymentRequestMessage
from ipay88_gateway.domain.messages.payment_response import (
    PaymentNotifyResponseMessage,
    PaymentResponseMessage,
)
from ipay88_gateway.domain.messages.payment_status import (
    PaymentStatusRequestMessage,
    PaymentStatusResponseMessage,
)
from ipay88_gateway.domain.messages.registry import MESSAGE_CLASSES, message_class_for
from ipay88_gateway.domain.messages.variants import PAIRED_VARIANTS, MessageVariant

__all__ = [
    "MESSAGE_CLASSES",
    "PAIRED_VARIANTS",
    "Message",
    "MessageVariant",
    "PaymentMessage",
    "PaymentNotifyResponseMessage",
    "PaymentRequestMessage",
    "PaymentResponseMessage",
    "PaymentStatusRequestMessage",
    "PaymentStatusResponseMessage",
    "message_class_for",
]
