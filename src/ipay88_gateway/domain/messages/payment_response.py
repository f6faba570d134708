from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ipay88_gateway.domain.catalog import PaymentStatus
from ipay88_gateway.domain.constraints import (
    SIGNATURE_CRITICAL,
    FieldConstraint,
    MaxLength,
    NotBlank,
    Pattern,
    ValidationGroup,
    constraints_for,
)
from ipay88_gateway.domain.messages.payment import PaymentMessage
from ipay88_gateway.domain.messages.variants import MessageVariant

MASKED_CARD_NUMBER_PATTERN = r"^\d{6}x{2,6}\d{4}$"


@dataclass(kw_only=True)
class PaymentResponseMessage(PaymentMessage):
    """Payment outcome returned by the gateway to the return URL.

    Signature recipe: secret, seller identifier, payment method, payment
    reference, amount (separator-free), currency, status.
    """

    VARIANT: ClassVar[MessageVariant] = MessageVariant.PAYMENT_RESPONSE
    IS_RESPONSE: ClassVar[bool] = True
    SIGNATURE_RECIPE: ClassVar[tuple[str, ...]] = (
        "seller_identifier",
        "payment_method",
        "payment_reference",
        "payment_amount",
        "payment_currency",
        "payment_status",
    )
    PAYMENT_METHOD_GROUPS: ClassVar[frozenset[ValidationGroup]] = SIGNATURE_CRITICAL
    MESSAGE_URL: ClassVar[str | None] = "https://www.mobile88.com/epayment/entry.asp"

    payment_identifier: str | None = None
    payment_status: str | None = None
    payment_error: str | None = None
    credit_card_authorization_code: str | None = None
    credit_card_number: str | None = None
    credit_card_holder_name: str | None = None
    credit_card_issuer_name: str | None = None
    credit_card_issuer_country: str | None = None

    def __str__(self) -> str:
        return f"Payment response {self.payment_identifier} (reference {self.payment_reference})"

    def is_succeeded(self) -> bool:
        return self._status_is(PaymentStatus.SUCCEEDED)

    def is_failed(self) -> bool:
        return self._status_is(PaymentStatus.FAILED)

    def is_delayed(self) -> bool:
        return self._status_is(PaymentStatus.DELAYED)

    def _status_is(self, status: PaymentStatus) -> bool:
        return self.payment_status is not None and str(self.payment_status) == status.value

    @classmethod
    def constraints(cls) -> tuple[FieldConstraint, ...]:
        return (
            *super().constraints(),
            *constraints_for(
                "payment_method",
                NotBlank("The payment method must not be blank."),
                groups=SIGNATURE_CRITICAL,
            ),
            *constraints_for(
                "payment_status",
                NotBlank("The payment status must not be blank."),
                MaxLength(1, "The payment status {value} must have {limit} characters or less."),
                groups=SIGNATURE_CRITICAL,
            ),
            *constraints_for(
                "credit_card_authorization_code",
                MaxLength(
                    20,
                    "The credit card authorization code {value} must have {limit} characters or less.",
                ),
            ),
            *constraints_for(
                "credit_card_holder_name",
                MaxLength(
                    200, "The credit card holder name {value} must have {limit} characters or less."
                ),
            ),
            *constraints_for(
                "credit_card_issuer_country",
                MaxLength(
                    100, "The credit card country {value} must have {limit} characters or less."
                ),
            ),
            *constraints_for(
                "credit_card_issuer_name",
                MaxLength(
                    100, "The credit card issuer name {value} must have {limit} characters or less."
                ),
            ),
            *constraints_for(
                "credit_card_number",
                MaxLength(16, "The credit card number {value} must have {limit} characters or less."),
                Pattern(
                    MASKED_CARD_NUMBER_PATTERN,
                    "The credit card number {value} must be partially hidden with just the "
                    'first six and last four digits visible (e.g., "123456xxxxxx7890").',
                ),
            ),
            *constraints_for(
                "payment_error",
                MaxLength(100, "The error {value} must have {limit} characters or less."),
            ),
            *constraints_for(
                "payment_identifier",
                MaxLength(30, "The payment identifier {value} must have {limit} characters or less."),
            ),
        )

    @classmethod
    def transport_fields(cls) -> dict[str, str]:
        return {
            **super().transport_fields(),
            "TransId": "payment_identifier",
            "Status": "payment_status",
            "ErrDesc": "payment_error",
            "AuthCode": "credit_card_authorization_code",
            "CCNo": "credit_card_number",
            "CCName": "credit_card_holder_name",
            "S_bankname": "credit_card_issuer_name",
            "S_country": "credit_card_issuer_country",
        }


@dataclass(kw_only=True)
class PaymentNotifyResponseMessage(PaymentResponseMessage):
    """Payment outcome posted server-to-server by the gateway to the notify URL."""

    VARIANT: ClassVar[MessageVariant] = MessageVariant.PAYMENT_NOTIFY_RESPONSE
    MESSAGE_URL: ClassVar[str | None] = None

    def __str__(self) -> str:
        return (
            f"Payment notify response {self.payment_identifier} "
            f"(reference {self.payment_reference})"
        )
