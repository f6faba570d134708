from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ipay88_gateway.domain.catalog import CHARACTER_ENCODINGS, SIGNATURE_TYPES
from ipay88_gateway.domain.constraints import (
    SIGNATURE_CRITICAL,
    Choice,
    Email,
    FieldConstraint,
    MaxLength,
    NotBlank,
    Url,
    constraints_for,
)
from ipay88_gateway.domain.messages.payment import PaymentMessage
from ipay88_gateway.domain.messages.variants import MessageVariant


@dataclass(kw_only=True)
class PaymentRequestMessage(PaymentMessage):
    """Payment request posted by the customer's browser to the gateway.

    Signature recipe: secret, seller identifier, payment reference, amount
    (separator-free), currency. Changing ``signature_type`` also clears the
    stored signature since it selects the hash algorithm.
    """

    VARIANT: ClassVar[MessageVariant] = MessageVariant.PAYMENT_REQUEST
    IS_REQUEST: ClassVar[bool] = True
    SIGNATURE_RECIPE: ClassVar[tuple[str, ...]] = (
        "seller_identifier",
        "payment_reference",
        "payment_amount",
        "payment_currency",
    )
    SIGNATURE_TYPE_FIELD: ClassVar[str | None] = "signature_type"
    MESSAGE_URL: ClassVar[str | None] = "https://www.mobile88.com/epayment/entry.asp"
    SIGNATURE_TEST_URL: ClassVar[str | None] = (
        "https://www.mobile88.com/epayment/testing/testsignature_256.asp"
    )

    payment_description: str | None = None
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None
    character_encoding: str | None = None
    signature_type: str | None = None
    return_url: str | None = None
    notify_url: str | None = None

    def __str__(self) -> str:
        return f"Payment request {self.payment_reference}"

    @classmethod
    def constraints(cls) -> tuple[FieldConstraint, ...]:
        return (
            *super().constraints(),
            *constraints_for(
                "customer_email",
                NotBlank("The customer email address must not be blank."),
                MaxLength(
                    100, "The customer email address {value} must have {limit} characters or less."
                ),
                Email("The customer email address {value} must be a valid email address."),
            ),
            *constraints_for(
                "customer_name",
                NotBlank("The customer name must not be blank."),
                MaxLength(100, "The customer name {value} must have {limit} characters or less."),
            ),
            *constraints_for(
                "customer_phone",
                NotBlank("The customer phone number must not be blank."),
                MaxLength(
                    20, "The customer phone number {value} must have {limit} characters or less."
                ),
            ),
            *constraints_for(
                "payment_description",
                NotBlank("The payment description must not be blank."),
                MaxLength(
                    100, "The payment description {value} must have {limit} characters or less."
                ),
            ),
            *constraints_for(
                "character_encoding",
                NotBlank("The message encoding must not be blank."),
                MaxLength(20, "The message encoding {value} must have {limit} characters or less."),
                Choice(
                    tuple(CHARACTER_ENCODINGS),
                    'The message encoding {value} must be a valid one: "{choices}".',
                ),
            ),
            *constraints_for(
                "notify_url",
                NotBlank("The notify URL must not be blank."),
                MaxLength(200, "The notify URL {value} must have {limit} characters or less."),
                Url("The notify URL {value} must be a valid URL."),
            ),
            *constraints_for(
                "return_url",
                NotBlank("The return URL must not be blank."),
                MaxLength(200, "The return URL {value} must have {limit} characters or less."),
                Url("The return URL {value} must be a valid URL."),
            ),
            *constraints_for(
                "signature_type",
                NotBlank("The message signature type must not be blank."),
                MaxLength(
                    10, "The message signature type {value} must have {limit} characters or less."
                ),
                Choice(
                    tuple(SIGNATURE_TYPES),
                    'The message signature type {value} must be a valid one: "{choices}".',
                ),
                groups=SIGNATURE_CRITICAL,
            ),
        )

    @classmethod
    def transport_fields(cls) -> dict[str, str]:
        return {
            **super().transport_fields(),
            "ProdDesc": "payment_description",
            "UserName": "customer_name",
            "UserEmail": "customer_email",
            "UserContact": "customer_phone",
            "Lang": "character_encoding",
            "SignatureType": "signature_type",
            "ResponseURL": "return_url",
            "BackendURL": "notify_url",
        }
