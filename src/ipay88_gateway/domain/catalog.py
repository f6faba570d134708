"""Static lookup tables of the iPay88 Online Payment Switching Gateway.

The tables are read-only after import. Lookups of unknown keys raise
UnknownCatalogEntryError; nothing here mutates state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any

from ipay88_gateway.domain.exceptions import UnknownCatalogEntryError


class CatalogCategory(Enum):
    """Field catalog categories."""

    AREA = "area"
    CHARACTER_ENCODING = "character encoding"
    CURRENCY = "currency"
    ERROR = "error"
    LANGUAGE = "language"
    PAYMENT_METHOD = "payment method"
    SIGNATURE_TYPE = "signature type"
    STATUS = "status"
    STATUS_MESSAGE = "status message"


class PaymentStatus(Enum):
    """Payment outcome codes as sent in the ``Status`` wire field."""

    ERRORED = "-1"
    FAILED = "0"
    SUCCEEDED = "1"
    DELAYED = "6"


AREA_MALAYSIA = 1
AREA_MULTICURRENCY = 2

STATUS_MESSAGE_SUCCEEDED = "00"
STATUS_MESSAGE_FAILED = "Payment fail"
STATUS_MESSAGE_INVALID_AMOUNT = "Incorrect amount"
STATUS_MESSAGE_INVALID_PARAMETERS = "Invalid parameters"
STATUS_MESSAGE_INVALID_REFERENCE = "Record not found"
STATUS_MESSAGE_IPAY88_CANCELED = "M88Admin"
STATUS_MESSAGE_IPAY88_EXCEEDED_LIMIT = "Limited by per day maximum number of requery"

SIGNATURE_TYPE_SHA256 = "SHA256"


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class Area:
    code: int
    label: str


@dataclass(frozen=True, slots=True)
class Currency:
    code: str
    label: str
    areas: tuple[int, ...]
    amount_test_value: Decimal


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    code: str
    label: str
    currency: str
    area: int
    delayed: bool = False
    delay_seconds: int | None = None


@dataclass(frozen=True, slots=True)
class CharacterEncoding:
    code: str
    label: str
    language: str
    gateway_code: str | None = None


@dataclass(frozen=True, slots=True)
class Language:
    code: str
    label: str
    character_encoding: str
    character_encodings: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SignatureType:
    code: str
    label: str


@dataclass(frozen=True, slots=True)
class Status:
    code: str
    label: str
    description: str


@dataclass(frozen=True, slots=True)
class StatusMessage:
    """Outcome of a payment status enquiry."""

    code: str
    label: str
    description: str
    status: PaymentStatus
    parameter: str | None = None


@dataclass(frozen=True, slots=True)
class GatewayError:
    """Known ``ErrDesc`` value returned in payment responses."""

    code: str
    label: str
    description: str
    parameters: tuple[str, ...] = ()


# =============================================================================
# Tables
# =============================================================================


def _table(*records: Any) -> Mapping[Any, Any]:
    return MappingProxyType({record.code: record for record in records})


AREAS = _table(
    Area(AREA_MALAYSIA, "Malaysia"),
    Area(AREA_MULTICURRENCY, "Others"),
)

CURRENCIES = _table(
    Currency("AUD", "Australian Dollar", (AREA_MULTICURRENCY,), Decimal("1")),
    Currency("CAD", "Canadian Dollar", (AREA_MULTICURRENCY,), Decimal("1")),
    Currency("EUR", "Euro", (AREA_MULTICURRENCY,), Decimal("1")),
    Currency("GBP", "Pound Sterling", (AREA_MULTICURRENCY,), Decimal("1")),
    Currency("HKD", "Hong Kong Dollar", (AREA_MULTICURRENCY,), Decimal("2.5")),
    Currency("MYR", "Malaysian Ringgit", (AREA_MALAYSIA, AREA_MULTICURRENCY), Decimal("1")),
    Currency("SGD", "Singapore Dollar", (AREA_MULTICURRENCY,), Decimal("1")),
    Currency("THB", "Thailand Baht", (AREA_MULTICURRENCY,), Decimal("15")),
    Currency("USD", "US Dollar", (AREA_MULTICURRENCY,), Decimal("1")),
)

CHARACTER_ENCODINGS = _table(
    CharacterEncoding("BIG5", "BIG5", "zh-hant"),
    CharacterEncoding("GB2312", "GB2312", "zh-hans"),
    # Misspelled on the gateway side.
    CharacterEncoding("GB18030", "GB18030", "zh-hans", gateway_code="GD18030"),
    CharacterEncoding("ISO-8859-1", "ISO-8859-1", "en"),
    CharacterEncoding("UTF-8", "UTF-8", "en"),
)

LANGUAGES = _table(
    Language("en", "English", "UTF-8", ("ISO-8859-1", "UTF-8")),
    Language("zh-hans", "Simplified Chinese", "GB18030", ("GB2312", "GB18030")),
    Language("zh-hant", "Traditional Chinese", "BIG5", ("BIG5",)),
)

PAYMENT_METHODS = _table(
    PaymentMethod("2", "Credit Card", "MYR", AREA_MALAYSIA),
    PaymentMethod("6", "Maybank2U", "MYR", AREA_MALAYSIA),
    PaymentMethod("8", "Alliance Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("10", "AmOnline", "MYR", AREA_MALAYSIA),
    PaymentMethod("14", "RHB Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("15", "Hong Leong Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("20", "CIMB Click", "MYR", AREA_MALAYSIA),
    PaymentMethod("22", "Web Cash", "MYR", AREA_MALAYSIA),
    PaymentMethod("25", "Credit Card", "USD", AREA_MULTICURRENCY),
    PaymentMethod("31", "Public Bank Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("35", "Credit Card", "GBP", AREA_MULTICURRENCY),
    PaymentMethod("36", "Credit Card", "THB", AREA_MULTICURRENCY),
    PaymentMethod("37", "Credit Card", "CAD", AREA_MULTICURRENCY),
    PaymentMethod("38", "Credit Card", "SGD", AREA_MULTICURRENCY),
    PaymentMethod("39", "Credit Card", "AUD", AREA_MULTICURRENCY),
    PaymentMethod("40", "Credit Card", "MYR", AREA_MULTICURRENCY),
    PaymentMethod("41", "Credit Card", "EUR", AREA_MULTICURRENCY),
    PaymentMethod("42", "Credit Card", "HKD", AREA_MULTICURRENCY),
    PaymentMethod("48", "PayPal", "MYR", AREA_MALAYSIA),
    PaymentMethod("55", "Credit Card Pre-Auth", "MYR", AREA_MALAYSIA),
    PaymentMethod("102", "Bank Rakyat Internet Banking", "MYR", AREA_MALAYSIA),
    PaymentMethod("103", "Affin Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("122", "Pay4Me", "MYR", AREA_MALAYSIA, delayed=True),
    PaymentMethod("124", "BSN Online", "MYR", AREA_MALAYSIA),
    PaymentMethod("134", "Bank Islam", "MYR", AREA_MALAYSIA),
    PaymentMethod("152", "UOB", "MYR", AREA_MALAYSIA),
    PaymentMethod("163", "Hong Leong PEx+", "MYR", AREA_MALAYSIA),
    PaymentMethod("166", "Bank Muamalat", "MYR", AREA_MALAYSIA),
    PaymentMethod("167", "OCBC", "MYR", AREA_MALAYSIA),
    PaymentMethod("168", "Standard Chartered Bank", "MYR", AREA_MALAYSIA),
    PaymentMethod(
        "173", "CIMB Virtual Account", "MYR", AREA_MALAYSIA, delayed=True, delay_seconds=604800
    ),
    PaymentMethod("198", "HSBC Online Banking", "MYR", AREA_MALAYSIA),
    PaymentMethod("199", "Kuwait Finance House", "MYR", AREA_MALAYSIA),
    PaymentMethod("210", "Boost Wallet", "MYR", AREA_MALAYSIA),
    PaymentMethod("243", "VCash", "MYR", AREA_MALAYSIA),
)

SIGNATURE_TYPES = _table(
    SignatureType(SIGNATURE_TYPE_SHA256, "SHA256"),
)

STATUSES = _table(
    Status(PaymentStatus.DELAYED.value, "Delayed payment", "The payment is delayed."),
    Status(PaymentStatus.FAILED.value, "Failed payment", "The payment failed."),
    Status(PaymentStatus.SUCCEEDED.value, "Succeeded payment", "The payment succeeded."),
)

STATUS_MESSAGES = _table(
    StatusMessage(
        STATUS_MESSAGE_FAILED,
        "Failed payment",
        "The payment has failed.",
        PaymentStatus.FAILED,
    ),
    StatusMessage(
        STATUS_MESSAGE_INVALID_AMOUNT,
        "Invalid payment amount.",
        "The payment amount is invalid.",
        PaymentStatus.ERRORED,
        parameter="Amount",
    ),
    StatusMessage(
        STATUS_MESSAGE_INVALID_PARAMETERS,
        "Invalid payment parameters",
        "One or more payment parameters are invalid.",
        PaymentStatus.ERRORED,
    ),
    StatusMessage(
        STATUS_MESSAGE_INVALID_REFERENCE,
        "Invalid payment reference",
        "The payment reference is invalid.",
        PaymentStatus.ERRORED,
        parameter="RefNo",
    ),
    StatusMessage(
        STATUS_MESSAGE_IPAY88_CANCELED,
        "Canceled payment by iPay88",
        "The payment has been canceled by iPay88 Online Payment Switching "
        "Gateway administrator.",
        PaymentStatus.FAILED,
    ),
    StatusMessage(
        STATUS_MESSAGE_IPAY88_EXCEEDED_LIMIT,
        "Exceeded limit",
        "The number of payment status requests exceeds the allowed limit per day.",
        PaymentStatus.ERRORED,
    ),
    StatusMessage(
        STATUS_MESSAGE_SUCCEEDED,
        "Succeeded payment",
        "The payment has succeeded.",
        PaymentStatus.SUCCEEDED,
    ),
)

ERRORS = _table(
    GatewayError(
        "Customer Cancel Transaction",
        "Canceled payment",
        "The payment has been canceled by the customer.",
    ),
    GatewayError(
        "Duplicate reference number",
        "Invalid payment reference",
        "The payment reference has already been processed by iPay88 Online "
        "Payment Switching Gateway within another payment request.",
        ("RefNo",),
    ),
    GatewayError(
        "Fail(Bank Declined Transaction)",
        "Declined payment",
        "The payment has been declined by the customer's bank.",
    ),
    GatewayError(
        "Invalid merchant",
        "Invalid seller identifier",
        "The seller identifier is invalid.",
        ("MerchantCode",),
    ),
    GatewayError(
        "Invalid merchant code",
        "Invalid seller identifier",
        "The seller identifier is invalid.",
        ("MerchantCode",),
    ),
    GatewayError(
        "Invalid parameters",
        "Invalid parameters",
        "One or more parameters are invalid.",
    ),
    GatewayError(
        "Overlimit per transaction",
        "Exceeded amount limit",
        "The amount exceeds the allowed limit.",
        ("Amount",),
    ),
    GatewayError(
        "Payment not allowed",
        "Unallowed payment method",
        "The payment method is not allowed by iPay88 Online Payment Switching Gateway.",
        ("PaymentId",),
    ),
    GatewayError(
        "Permission not allow",
        "Invalid URLs",
        "The notify, the return and/or the request URLs are not allowed by "
        "iPay88 Online Payment Switching Gateway.",
        ("BackendURL", "ResponseURL"),
    ),
    GatewayError(
        "Signature not match",
        "Invalid signature",
        "The signature is invalid.",
        ("Signature",),
    ),
    GatewayError(
        "Status not approved",
        "Unallowed seller",
        "The seller is not allowed by iPay88 Online Payment Switching Gateway.",
        ("MerchantCode",),
    ),
    GatewayError(
        "Transaction Timeout",
        "Expired payment",
        "The payment allowed time has expired.",
    ),
)

_TABLES: Mapping[CatalogCategory, Mapping[Any, Any]] = MappingProxyType(
    {
        CatalogCategory.AREA: AREAS,
        CatalogCategory.CHARACTER_ENCODING: CHARACTER_ENCODINGS,
        CatalogCategory.CURRENCY: CURRENCIES,
        CatalogCategory.ERROR: ERRORS,
        CatalogCategory.LANGUAGE: LANGUAGES,
        CatalogCategory.PAYMENT_METHOD: PAYMENT_METHODS,
        CatalogCategory.SIGNATURE_TYPE: SIGNATURE_TYPES,
        CatalogCategory.STATUS: STATUSES,
        CatalogCategory.STATUS_MESSAGE: STATUS_MESSAGES,
    }
)


# =============================================================================
# Lookups
# =============================================================================


def lookup(category: CatalogCategory, key: Any) -> Any:
    """Return the record stored under ``key`` in ``category``.

    Raises:
        UnknownCatalogEntryError: If the key is absent.
    """
    try:
        return _TABLES[category][key]
    except (KeyError, TypeError) as e:
        raise UnknownCatalogEntryError(category.value, key) from e


def list_all(category: CatalogCategory) -> Mapping[Any, Any]:
    """Return every record of ``category`` as a read-only mapping."""
    return _TABLES[category]


def filter_by(category: CatalogCategory, predicate: Callable[[Any], bool]) -> Mapping[Any, Any]:
    """Return the records of ``category`` for which ``predicate`` is true."""
    return MappingProxyType(
        {key: record for key, record in _TABLES[category].items() if predicate(record)}
    )


def currencies_for_area(area: int) -> Mapping[str, Currency]:
    return filter_by(CatalogCategory.CURRENCY, lambda currency: area in currency.areas)


def areas_for_currency(currency: str) -> Mapping[int, Area]:
    areas = lookup(CatalogCategory.CURRENCY, currency).areas
    return filter_by(CatalogCategory.AREA, lambda area: area.code in areas)


def payment_methods_for(
    area: int | None = None, currency: str | None = None
) -> Mapping[str, PaymentMethod]:
    """Return the payment methods available in an area and/or a currency."""
    return filter_by(
        CatalogCategory.PAYMENT_METHOD,
        lambda method: (area is None or method.area == area)
        and (currency is None or method.currency == currency),
    )


def amount_test_value(currency: str) -> Decimal:
    """Return the smallest amount the gateway accepts for test payments."""
    return lookup(CatalogCategory.CURRENCY, currency).amount_test_value


def gateway_character_encoding(character_encoding: str) -> str:
    record = lookup(CatalogCategory.CHARACTER_ENCODING, character_encoding)
    return record.gateway_code or record.code


def language_for_character_encoding(character_encoding: str) -> str:
    return lookup(CatalogCategory.CHARACTER_ENCODING, character_encoding).language


def character_encoding_for_language(language: str) -> str:
    return lookup(CatalogCategory.LANGUAGE, language).character_encoding
