from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationViolation:
    """One failed field constraint.

    ``field`` is the message attribute name (e.g. "payment_reference"),
    ``code`` the constraint identifier (e.g. "MAX_LENGTH").
    """

    field: str
    message: str
    value: Any
    code: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
