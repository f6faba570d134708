from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ipay88_gateway.domain.catalog import CURRENCIES, PAYMENT_METHODS
from ipay88_gateway.domain.constraints import (
    FULL_ONLY,
    SIGNATURE_CRITICAL,
    Choice,
    FieldConstraint,
    MaxLength,
    NotBlank,
    ValidationGroup,
    constraints_for,
)
from ipay88_gateway.domain.messages.base import Message


@dataclass(kw_only=True)
class PaymentMessage(Message):
    """Common ground of payment requests and payment responses.

    Payment messages always carry a currency and are always signed.
    """

    SIGNATURE_REQUIRED: ClassVar[bool] = True
    PAYMENT_METHOD_GROUPS: ClassVar[frozenset[ValidationGroup]] = FULL_ONLY

    payment_currency: str | None = None
    payment_method: str | None = None
    payment_comment: str | None = None

    @classmethod
    def constraints(cls) -> tuple[FieldConstraint, ...]:
        return (
            *super().constraints(),
            *constraints_for(
                "payment_comment",
                MaxLength(100, "The payment comment {value} must have {limit} characters or less."),
            ),
            *constraints_for(
                "payment_currency",
                NotBlank("The payment currency must not be blank."),
                MaxLength(5, "The payment currency {value} must have {limit} characters or less."),
                Choice(
                    tuple(CURRENCIES),
                    'The payment currency {value} must be a valid one: "{choices}".',
                ),
                groups=SIGNATURE_CRITICAL,
            ),
            *constraints_for(
                "payment_method",
                Choice(
                    tuple(PAYMENT_METHODS),
                    'The payment method {value} must be a valid one: "{choices}".',
                ),
                groups=cls.PAYMENT_METHOD_GROUPS,
            ),
        )

    @classmethod
    def transport_fields(cls) -> dict[str, str]:
        return {
            **super().transport_fields(),
            "Currency": "payment_currency",
            "PaymentId": "payment_method",
            "Remark": "payment_comment",
        }
