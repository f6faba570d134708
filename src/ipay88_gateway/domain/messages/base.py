"""Base class of every message exchanged with the gateway."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar
from urllib.parse import parse_qsl

from ipay88_gateway.domain import signature
from ipay88_gateway.domain.catalog import SIGNATURE_TYPE_SHA256
from ipay88_gateway.domain.constraints import (
    SIGNATURE_CRITICAL,
    FieldConstraint,
    MaxLength,
    NotBlank,
    NotNull,
    Numeric,
    constraints_for,
)
from ipay88_gateway.domain.exceptions import InvalidAssociationError
from ipay88_gateway.domain.messages.variants import PAIRED_VARIANTS
from ipay88_gateway.domain.value_objects.amount import (
    format_amount_for_transport,
    is_numeric_amount,
    parse_transport_amount,
    to_decimal,
)

if TYPE_CHECKING:
    from ipay88_gateway.domain.messages.variants import MessageVariant
    from ipay88_gateway.domain.value_objects.violation import ValidationViolation


@dataclass(kw_only=True)
class Message:
    """A unit of protocol exchange.

    Messages are mutable until they are signed and validated. The signature
    is derived state: assigning any attribute listed in SIGNATURE_RECIPE (or
    the SIGNATURE_TYPE_FIELD) resets ``message_signature`` to None until
    sign() is called again.

    Class-level capabilities:
        VARIANT: tag used for pairing and event lookup.
        IS_REQUEST / IS_RESPONSE: direction of the message.
        SIGNATURE_REQUIRED: whether the message carries a keyed signature.
        HTTP_METHOD / MESSAGE_URL / SIGNATURE_TEST_URL: HTTP binding.
    """

    VARIANT: ClassVar[MessageVariant]
    IS_REQUEST: ClassVar[bool] = False
    IS_RESPONSE: ClassVar[bool] = False
    SIGNATURE_REQUIRED: ClassVar[bool] = False
    SIGNATURE_RECIPE: ClassVar[tuple[str, ...]] = ()
    SIGNATURE_TYPE_FIELD: ClassVar[str | None] = None
    HTTP_METHOD: ClassVar[str] = "POST"
    MESSAGE_URL: ClassVar[str | None] = None
    SIGNATURE_TEST_URL: ClassVar[str | None] = None

    seller_identifier: str | None = None
    payment_reference: str | None = None
    payment_amount: Decimal | None = None
    message_signature: str | None = field(default=None, init=False)
    message_url: str | None = field(default=None, init=False, repr=False, compare=False)
    message_http_method: str | None = field(default=None, init=False, repr=False, compare=False)
    related_message: Message | None = field(default=None, init=False, repr=False, compare=False)
    validation_violations: list[ValidationViolation] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.message_url is None:
            self.message_url = self.MESSAGE_URL
        if self.message_http_method is None:
            self.message_http_method = self.HTTP_METHOD

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "related_message" and value is not None:
            self._check_related_message(value)
        elif name == "payment_amount" and is_numeric_amount(value):
            value = to_decimal(value)

        object.__setattr__(self, name, value)

        if name in self.SIGNATURE_RECIPE or name == self.SIGNATURE_TYPE_FIELD:
            object.__setattr__(self, "message_signature", None)

    def __str__(self) -> str:
        return f"Message {self.payment_reference}"

    # -------------------------------------------------------------------------
    # Pairing
    # -------------------------------------------------------------------------

    @classmethod
    def paired_message_class(cls) -> type[Message] | None:
        """Return the class of the message this one answers or expects."""
        from ipay88_gateway.domain.messages.registry import message_class_for

        paired_variant = PAIRED_VARIANTS.get(cls.VARIANT)
        if paired_variant is None:
            return None
        return message_class_for(paired_variant)

    def _check_related_message(self, related_message: Any) -> None:
        expected = self.paired_message_class()
        if expected is not None and not isinstance(related_message, expected):
            raise InvalidAssociationError(
                f'The related message must be a "{expected.__name__}", '
                f'"{type(related_message).__name__}" given.'
            )

    # -------------------------------------------------------------------------
    # Signature
    # -------------------------------------------------------------------------

    def signature_algorithm(self) -> str | None:
        """Return the hash algorithm name used to sign this message."""
        if not self.SIGNATURE_REQUIRED:
            return None
        if self.SIGNATURE_TYPE_FIELD is None:
            return SIGNATURE_TYPE_SHA256
        return getattr(self, self.SIGNATURE_TYPE_FIELD)

    def generate_signature(self, shared_secret: str) -> str | None:
        return signature.compute_signature(self, shared_secret)

    def sign(self, shared_secret: str) -> str | None:
        """Compute the signature and store it on the message."""
        self.message_signature = self.generate_signature(shared_secret)
        return self.message_signature

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @classmethod
    def constraints(cls) -> tuple[FieldConstraint, ...]:
        """Return the field constraints declared for this message class."""
        declared = (
            *constraints_for(
                "payment_amount",
                NotBlank("The payment amount must not be blank."),
                Numeric("The payment amount {value} must be numeric."),
                groups=SIGNATURE_CRITICAL,
            ),
            *constraints_for(
                "payment_reference",
                NotNull("The payment reference must not be null."),
                MaxLength(30, "The payment reference {value} must have {limit} characters or less."),
                groups=SIGNATURE_CRITICAL,
            ),
            *constraints_for(
                "seller_identifier",
                NotBlank("The seller identifier must not be blank."),
                MaxLength(20, "The seller identifier {value} must have {limit} characters or less."),
                groups=SIGNATURE_CRITICAL,
            ),
        )
        if cls.SIGNATURE_REQUIRED:
            declared += constraints_for(
                "message_signature",
                NotBlank("The message signature must not be blank."),
                MaxLength(100, "The message signature must have {limit} characters or less."),
            )
        return declared

    def has_validation_violations(self) -> bool:
        return bool(self.validation_violations)

    # -------------------------------------------------------------------------
    # Transport mapping
    # -------------------------------------------------------------------------

    @classmethod
    def transport_fields(cls) -> dict[str, str]:
        """Return the wire field name -> attribute name mapping, in wire order."""
        fields = {
            "MerchantCode": "seller_identifier",
            "RefNo": "payment_reference",
            "Amount": "payment_amount",
        }
        if cls.SIGNATURE_REQUIRED:
            fields["Signature"] = "message_signature"
        return fields

    def to_transport_mapping(self) -> dict[str, str]:
        """Serialize the message to wire fields; unset fields are omitted."""
        mapping: dict[str, str] = {}
        for wire_name, attribute in self.transport_fields().items():
            value = getattr(self, attribute)
            if value is None:
                continue
            if attribute == "payment_amount" and is_numeric_amount(value):
                value = format_amount_for_transport(value)
            mapping[wire_name] = str(value)
        return mapping

    @classmethod
    def from_transport_mapping(cls, mapping: Mapping[str, Any]) -> Message:
        """Build a message from wire fields.

        Missing keys leave the attribute unset; an unparseable amount is kept
        as received so that validation reports it.
        """
        values = {
            attribute: mapping.get(wire_name)
            for wire_name, attribute in cls.transport_fields().items()
            if attribute != "message_signature"
        }
        if values.get("payment_amount") is not None:
            values["payment_amount"] = _coerce_transport_amount(values["payment_amount"])

        message = cls(**values)
        if cls.SIGNATURE_REQUIRED:
            message.message_signature = mapping.get("Signature")
        return message

    @classmethod
    def mapping_from_body(cls, body: str | Mapping[str, Any]) -> Mapping[str, Any]:
        """Turn a raw transport body into wire fields (form-encoded by default)."""
        if isinstance(body, Mapping):
            return body
        return dict(parse_qsl(body.strip(), keep_blank_values=True))

    @classmethod
    def from_transport_body(cls, body: str | Mapping[str, Any]) -> Message:
        return cls.from_transport_mapping(cls.mapping_from_body(body))


def _coerce_transport_amount(value: Any) -> Any:
    if is_numeric_amount(value):
        return value
    try:
        return parse_transport_amount(value)
    except ValueError:
        return value
