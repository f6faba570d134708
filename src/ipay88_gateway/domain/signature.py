"""Keyed message signatures.

A signature is the hex SHA-256 digest of the shared secret followed by the
values named in the message class SIGNATURE_RECIPE, concatenated without
separators. The amount enters the digest in its separator-free form
("1234.5" -> "123450"); unset string fields contribute nothing.

Signatures are cached on the message in ``message_signature`` and cleared by
the message itself whenever a recipe field is assigned.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Callable
from typing import TYPE_CHECKING

from ipay88_gateway.domain.catalog import SIGNATURE_TYPE_SHA256
from ipay88_gateway.domain.value_objects.amount import (
    format_amount_for_signature,
    is_numeric_amount,
)

if TYPE_CHECKING:
    from ipay88_gateway.domain.messages.base import Message

_HASHERS: dict[str, Callable[[bytes], str]] = {
    SIGNATURE_TYPE_SHA256: lambda payload: hashlib.sha256(payload).hexdigest(),
}


def signature_payload(message: Message, shared_secret: str) -> str:
    """Return the string hashed for ``message``.

    Raises:
        TypeError: If the payment amount is not numeric.
    """
    parts = [shared_secret]
    for field_name in message.SIGNATURE_RECIPE:
        value = getattr(message, field_name)
        if field_name == "payment_amount":
            parts.append(format_amount_for_signature(value))
        else:
            parts.append("" if value is None else str(value))
    return "".join(parts)


def compute_signature(message: Message, shared_secret: str) -> str | None:
    """Compute the signature of ``message`` with ``shared_secret``.

    Returns:
        The hex digest, or None when the message class requires no signature,
        when its signature type is unsupported, or when the amount is not
        numeric (the validation pipeline reports the latter two).
    """
    if not message.SIGNATURE_REQUIRED:
        return None

    hasher = _HASHERS.get(message.signature_algorithm() or "")
    if hasher is None:
        return None

    if "payment_amount" in message.SIGNATURE_RECIPE and not is_numeric_amount(
        message.payment_amount
    ):
        return None

    return hasher(signature_payload(message, shared_secret).encode("utf-8"))


def verify_signature(message: Message, shared_secret: str) -> bool:
    """Check the stored signature against a freshly computed one."""
    expected = compute_signature(message, shared_secret)
    stored = message.message_signature
    if expected is None or stored is None:
        return expected == stored
    return hmac.compare_digest(expected.encode("utf-8"), str(stored).encode("utf-8"))
