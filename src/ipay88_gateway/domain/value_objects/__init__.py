"""Amount conversions and validation violations shared across message variants."""

from ipay88_gateway.domain.value_objects.amount import (
    amount_to_float,
    format_amount_for_signature,
    format_amount_for_transport,
    is_numeric_amount,
    parse_transport_amount,
    to_decimal,
)
from ipay88_gateway.domain.value_objects.violation import ValidationViolation

__all__ = [
    "ValidationViolation",
    "amount_to_float",
    "format_amount_for_signature",
    "format_amount_for_transport",
    "is_numeric_amount",
    "parse_transport_amount",
    "to_decimal",
]
