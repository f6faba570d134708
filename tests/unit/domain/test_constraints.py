"""Tests for declarative field constraints."""

from decimal import Decimal

import pytest

from ipay88_gateway.domain.constraints import (
    FULL_ONLY,
    SIGNATURE_CRITICAL,
    Choice,
    Email,
    MaxLength,
    NotBlank,
    NotNull,
    Numeric,
    Pattern,
    Url,
    ValidationGroup,
    constraints_for,
)
from ipay88_gateway.domain.messages import (
    PaymentRequestMessage,
    PaymentResponseMessage,
    PaymentStatusResponseMessage,
)
from ipay88_gateway.domain.messages.payment_response import MASKED_CARD_NUMBER_PATTERN
from ipay88_gateway.domain.value_objects import ValidationViolation

# =============================================================================
# Rule Tests
# =============================================================================


class TestRules:
    """Test individual rule semantics."""

    @pytest.mark.parametrize("value", [None, "", "   ", False, []])
    def test_not_blank_rejects_empty_values(self, value: object) -> None:
        assert not NotBlank("blank").is_valid(value)

    @pytest.mark.parametrize("value", ["x", 0, Decimal("0")])
    def test_not_blank_accepts_values(self, value: object) -> None:
        assert NotBlank("blank").is_valid(value)

    def test_not_null_accepts_empty_string(self) -> None:
        assert NotNull("null").is_valid("")
        assert not NotNull("null").is_valid(None)

    def test_max_length(self) -> None:
        rule = MaxLength(3, "too long")

        assert rule.is_valid("abc")
        assert not rule.is_valid("abcd")
        assert rule.is_valid(None)

    def test_numeric(self) -> None:
        rule = Numeric("numeric")

        assert rule.is_valid(Decimal("1.00"))
        assert rule.is_valid(None)
        assert not rule.is_valid("1.00")

    def test_choice_compares_text(self) -> None:
        rule = Choice((1, 2), "choice")

        assert rule.choices == ("1", "2")
        assert rule.is_valid("2")
        assert rule.is_valid(2)
        assert not rule.is_valid("3")
        assert rule.is_valid("")

    def test_url(self) -> None:
        rule = Url("url")

        assert rule.is_valid("https://shop.example.com/return")
        assert not rule.is_valid("not a url")
        assert rule.is_valid(None)

    def test_email(self) -> None:
        rule = Email("email")

        assert rule.is_valid("jane.doe@gmail.com")
        assert not rule.is_valid("jane.doe")

    @pytest.mark.parametrize(
        ("card_number", "valid"),
        [
            ("123456xxxxxx7890", True),
            ("123456xx7890", True),
            ("123456x7890", False),
            ("1234567890123456", False),
            ("123456XXXXXX7890", False),
        ],
    )
    def test_masked_card_number_pattern(self, card_number: str, valid: bool) -> None:
        assert Pattern(MASKED_CARD_NUMBER_PATTERN, "masked").is_valid(card_number) is valid

    def test_describe_formats_value_and_limit(self) -> None:
        rule = MaxLength(3, "{value} must have {limit} characters or less.")

        assert rule.describe("abcd") == "abcd must have 3 characters or less."

    def test_describe_formats_choices(self) -> None:
        rule = Choice(("A", "B"), '{value} must be one of "{choices}".')

        assert rule.describe("C") == 'C must be one of "A", "B".'


# =============================================================================
# Declaration Tests
# =============================================================================


class TestDeclaredConstraints:
    """Test the constraints declared by message classes."""

    def test_constraints_for_binds_rules_to_field(self) -> None:
        declared = constraints_for("payment_reference", NotNull("a"), MaxLength(30, "b"))

        assert [constraint.field for constraint in declared] == ["payment_reference"] * 2
        assert all(constraint.groups == FULL_ONLY for constraint in declared)

    def test_signature_critical_fields_of_request(self) -> None:
        fields = {
            constraint.field
            for constraint in PaymentRequestMessage.constraints()
            if ValidationGroup.SIGNATURE_PART in constraint.groups
        }

        assert fields == {
            "payment_amount",
            "payment_reference",
            "seller_identifier",
            "payment_currency",
            "signature_type",
        }

    def test_payment_method_is_signature_critical_for_responses_only(self) -> None:
        def method_groups(message_class: type) -> set[frozenset[ValidationGroup]]:
            return {
                constraint.groups
                for constraint in message_class.constraints()
                if constraint.field == "payment_method"
            }

        assert method_groups(PaymentRequestMessage) == {FULL_ONLY}
        assert method_groups(PaymentResponseMessage) == {SIGNATURE_CRITICAL}

    def test_status_response_only_checks_status_message(self) -> None:
        assert {c.field for c in PaymentStatusResponseMessage.constraints()} == {"status_message"}


class TestValidationViolation:
    """Test the violation value object."""

    def test_str(self) -> None:
        violation = ValidationViolation("payment_reference", "too long", "X" * 31, "MAX_LENGTH")

        assert str(violation) == "payment_reference: too long"

    def test_is_immutable(self) -> None:
        violation = ValidationViolation("a", "b", None, "NOT_BLANK")

        with pytest.raises(AttributeError):
            violation.code = "OTHER"  # type: ignore[misc]
