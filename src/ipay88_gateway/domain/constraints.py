"""Declarative field constraints attached to message classes.

Messages declare their constraints with ``FieldConstraint`` entries; a
MessageValidator adapter executes them group by group. Every rule except
NotBlank and NotNull treats an unset (None) or empty value as valid, so that
optional fields only get checked when present.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import EmailStr, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ipay88_gateway.domain.value_objects.amount import is_numeric_amount


class ValidationGroup(Enum):
    """Validation phases, evaluated in GROUP_SEQUENCE order."""

    SIGNATURE_PART = "signature_part"
    FULL = "full"


GROUP_SEQUENCE: tuple[ValidationGroup, ...] = (ValidationGroup.SIGNATURE_PART, ValidationGroup.FULL)

SIGNATURE_CRITICAL = frozenset({ValidationGroup.SIGNATURE_PART, ValidationGroup.FULL})
FULL_ONLY = frozenset({ValidationGroup.FULL})

SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"

_url_adapter: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)
_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


class Rule(ABC):
    """A single check applied to one field value."""

    code: ClassVar[str]
    message: str

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True if ``value`` satisfies the rule."""

    def describe(self, value: Any) -> str:
        return self.message.format(value=value)


@dataclass(frozen=True)
class NotBlank(Rule):
    message: str
    code: ClassVar[str] = "NOT_BLANK"

    def is_valid(self, value: Any) -> bool:
        if value is None or value is False:
            return False
        if isinstance(value, str):
            return value.strip() != ""
        if isinstance(value, (list, tuple, dict, set)):
            return len(value) > 0
        return True


@dataclass(frozen=True)
class NotNull(Rule):
    message: str
    code: ClassVar[str] = "NOT_NULL"

    def is_valid(self, value: Any) -> bool:
        return value is not None


@dataclass(frozen=True)
class MaxLength(Rule):
    limit: int
    message: str
    code: ClassVar[str] = "MAX_LENGTH"

    def is_valid(self, value: Any) -> bool:
        return _is_empty(value) or len(str(value)) <= self.limit

    def describe(self, value: Any) -> str:
        return self.message.format(value=value, limit=self.limit)


@dataclass(frozen=True)
class Numeric(Rule):
    message: str
    code: ClassVar[str] = "NUMERIC"

    def is_valid(self, value: Any) -> bool:
        return value is None or is_numeric_amount(value)


@dataclass(frozen=True)
class Choice(Rule):
    choices: tuple[str, ...]
    message: str
    code: ClassVar[str] = "CHOICE"

    def __post_init__(self) -> None:
        object.__setattr__(self, "choices", tuple(str(choice) for choice in self.choices))

    def is_valid(self, value: Any) -> bool:
        return _is_empty(value) or str(value) in self.choices

    def describe(self, value: Any) -> str:
        return self.message.format(value=value, choices='", "'.join(self.choices))


@dataclass(frozen=True)
class Url(Rule):
    message: str
    code: ClassVar[str] = "URL"

    def is_valid(self, value: Any) -> bool:
        if _is_empty(value):
            return True
        try:
            _url_adapter.validate_python(value)
        except PydanticValidationError:
            return False
        return True


@dataclass(frozen=True)
class Email(Rule):
    message: str
    code: ClassVar[str] = "EMAIL"

    def is_valid(self, value: Any) -> bool:
        if _is_empty(value):
            return True
        try:
            _email_adapter.validate_python(value)
        except PydanticValidationError:
            return False
        return True


@dataclass(frozen=True)
class Pattern(Rule):
    pattern: str
    message: str
    code: ClassVar[str] = "PATTERN"

    def is_valid(self, value: Any) -> bool:
        return _is_empty(value) or re.fullmatch(self.pattern, str(value)) is not None


@dataclass(frozen=True, slots=True)
class FieldConstraint:
    """Binds a rule to a message attribute and the groups it belongs to."""

    field: str
    rule: Rule
    groups: frozenset[ValidationGroup] = FULL_ONLY


def constraints_for(
    field_name: str,
    *rules: Rule,
    groups: frozenset[ValidationGroup] = FULL_ONLY,
) -> tuple[FieldConstraint, ...]:
    """Shorthand to declare several rules on the same field."""
    return tuple(FieldConstraint(field_name, rule, groups) for rule in rules)
