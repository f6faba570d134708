from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from ipay88_gateway.domain import catalog
from ipay88_gateway.domain.catalog import (
    STATUS_MESSAGE_IPAY88_CANCELED,
    CatalogCategory,
    PaymentStatus,
    StatusMessage,
)
from ipay88_gateway.domain.constraints import FieldConstraint, NotBlank, constraints_for
from ipay88_gateway.domain.exceptions import UnknownCatalogEntryError
from ipay88_gateway.domain.messages.base import Message
from ipay88_gateway.domain.messages.variants import MessageVariant

ENQUIRY_URL = "https://www.mobile88.com/epayment/enquiry.asp"


@dataclass(kw_only=True)
class PaymentStatusRequestMessage(Message):
    """Server-to-server enquiry about the status of a payment. Not signed."""

    VARIANT: ClassVar[MessageVariant] = MessageVariant.PAYMENT_STATUS_REQUEST
    IS_REQUEST: ClassVar[bool] = True
    MESSAGE_URL: ClassVar[str | None] = ENQUIRY_URL

    def __str__(self) -> str:
        return f"Payment status request {self.payment_reference}"


@dataclass(kw_only=True)
class PaymentStatusResponseMessage(Message):
    """Answer to a status enquiry: a single status message such as "00".

    The gateway answers with a bare text body; it is read from (and written
    to) the ``PaymentStatusMessage`` wire field only.
    """

    VARIANT: ClassVar[MessageVariant] = MessageVariant.PAYMENT_STATUS_RESPONSE
    IS_RESPONSE: ClassVar[bool] = True
    MESSAGE_URL: ClassVar[str | None] = ENQUIRY_URL
    STATUS_MESSAGE_KEY: ClassVar[str] = "PaymentStatusMessage"

    status_message: str | None = None

    def __str__(self) -> str:
        try:
            label = self.status_message_record().label
        except UnknownCatalogEntryError:
            label = self.status_message
        return f'Payment status response "{label}"'

    def status_message_record(self) -> StatusMessage:
        """Raises UnknownCatalogEntryError for undocumented status messages."""
        return catalog.lookup(CatalogCategory.STATUS_MESSAGE, self.status_message)

    def is_canceled(self) -> bool:
        return self.status_message == STATUS_MESSAGE_IPAY88_CANCELED

    def is_errored(self) -> bool:
        return self.status_message_record().status is PaymentStatus.ERRORED

    def is_failed(self) -> bool:
        return self.status_message_record().status is PaymentStatus.FAILED

    def is_succeeded(self) -> bool:
        return self.status_message_record().status is PaymentStatus.SUCCEEDED

    @classmethod
    def constraints(cls) -> tuple[FieldConstraint, ...]:
        return constraints_for(
            "status_message",
            NotBlank("The payment status message must not be blank."),
        )

    @classmethod
    def transport_fields(cls) -> dict[str, str]:
        return {cls.STATUS_MESSAGE_KEY: "status_message"}

    @classmethod
    def mapping_from_body(cls, body: str | Mapping[str, Any]) -> Mapping[str, Any]:
        if isinstance(body, Mapping):
            return body
        return {cls.STATUS_MESSAGE_KEY: body.strip()}
