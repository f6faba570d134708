"""Payment amount representations.

Three forms exist and must never be mixed:
    - internal: two-place Decimal (Decimal("1234.50"))
    - transport: comma-grouped display string ("1,234.50")
    - signature: separator-free digits ("123450")
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


def is_numeric_amount(value: object) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Normalize an amount to a two-place Decimal (half-up rounding).

    Raises:
        ValueError: If the value is not a number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        # via str(): 0.1 stays Decimal("0.1")
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e


def _require_numeric(amount: object) -> Decimal:
    if not is_numeric_amount(amount):
        raise TypeError(
            f'The amount "{amount}" must be a numeric value, {type(amount).__name__} given.'
        )
    return to_decimal(amount)  # type: ignore[arg-type]


def format_amount_for_transport(amount: int | float | Decimal) -> str:
    """Format an amount the way the gateway expects it on the wire."""
    return f"{_require_numeric(amount):,.2f}"


def format_amount_for_signature(amount: int | float | Decimal) -> str:
    """Format an amount for signature hashing: two decimals, no separators."""
    return f"{_require_numeric(amount):.2f}".replace(".", "")


def parse_transport_amount(text: str) -> Decimal:
    """Parse a wire amount such as "1,234.50".

    Raises:
        ValueError: If the text is not a formatted number.
    """
    if not isinstance(text, str):
        raise ValueError(f'The amount "{text}" must be a string value, {type(text).__name__} given.')
    return to_decimal(text.replace(",", "").strip())


def amount_to_float(amount: int | float | Decimal) -> float:
    return float(_require_numeric(amount))
