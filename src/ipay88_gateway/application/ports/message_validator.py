from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ipay88_gateway.domain.constraints import ValidationGroup
    from ipay88_gateway.domain.messages import Message
    from ipay88_gateway.domain.value_objects import ValidationViolation


class MessageValidator(ABC):
    """Port for the engine executing declared field constraints.

    Contract:
    - validate() reads the constraints from ``type(message).constraints()``
    - Groups are evaluated in order; evaluation stops after the first group
      that reports at least one violation (group sequence semantics)
    - Returns a new list on every call; never raises for invalid values
    """

    @abstractmethod
    def validate(
        self,
        message: Message,
        group_sequence: Sequence[ValidationGroup],
    ) -> list[ValidationViolation]:
        """Return the violations of ``message`` for ``group_sequence``."""
