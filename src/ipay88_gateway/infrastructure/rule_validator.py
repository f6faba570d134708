from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ipay88_gateway.application.ports import MessageValidator
from ipay88_gateway.domain.value_objects import ValidationViolation

if TYPE_CHECKING:
    from ipay88_gateway.domain.constraints import ValidationGroup
    from ipay88_gateway.domain.messages import Message


class RuleValidator(MessageValidator):
    """Executes the constraints declared by message classes.

    Implementation notes:
    - Constraints run in declaration order within a group
    - Every failing rule yields one violation (a field may fail several)
    - Stateless; safe to share between clients and threads
    """

    def validate(
        self,
        message: Message,
        group_sequence: Sequence[ValidationGroup],
    ) -> list[ValidationViolation]:
        constraints = type(message).constraints()
        for group in group_sequence:
            violations = [
                ValidationViolation(
                    field=constraint.field,
                    message=constraint.rule.describe(value),
                    value=value,
                    code=constraint.rule.code,
                )
                for constraint in constraints
                if group in constraint.groups
                for value in (getattr(message, constraint.field),)
                if not constraint.rule.is_valid(value)
            ]
            if violations:
                return violations
        return []
