from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ipay88_gateway.domain.constraints import SIGNATURE_MISMATCH, ValidationGroup
from ipay88_gateway.domain.exceptions import MissingSharedSecretError
from ipay88_gateway.domain.signature import verify_signature
from ipay88_gateway.domain.value_objects import ValidationViolation

if TYPE_CHECKING:
    from ipay88_gateway.application.ports import MessageValidator
    from ipay88_gateway.domain.messages import Message

logger = logging.getLogger(__name__)


class MessageValidationPipeline:
    """Validates a message in two ordered phases.

    Phase 1 checks the signature-critical fields (the ones the signature is
    computed from). Phase 2 only runs when phase 1 is clean; it checks every
    declared field and, for signed messages, compares the stored signature
    with a freshly computed one.

    The resulting list replaces ``message.validation_violations``; violations
    from a previous run are never kept.
    """

    def __init__(self, validator: MessageValidator) -> None:
        self._validator = validator

    def run(self, message: Message, shared_secret: str | None = None) -> list[ValidationViolation]:
        """Validate ``message`` and attach the violations to it.

        Args:
            message: The message to validate.
            shared_secret: Required when the message class is signed.

        Returns:
            The violations found (possibly empty).

        Raises:
            MissingSharedSecretError: Signed message and no shared secret.
        """
        if message.SIGNATURE_REQUIRED and not shared_secret:
            raise MissingSharedSecretError(
                f'The shared secret is expected to validate the message "{message}".'
            )

        violations = self._validator.validate(message, (ValidationGroup.SIGNATURE_PART,))
        if not violations:
            violations = self._validator.validate(message, (ValidationGroup.FULL,))
            if message.SIGNATURE_REQUIRED:
                violations.extend(self._check_signature(message, shared_secret))  # type: ignore[arg-type]

        message.validation_violations = violations
        if violations:
            logger.debug("%s has %d validation violation(s)", message, len(violations))
        return violations

    def _check_signature(self, message: Message, shared_secret: str) -> list[ValidationViolation]:
        # A blank signature is already reported by the declared constraints.
        if not message.message_signature or verify_signature(message, shared_secret):
            return []
        return [
            ValidationViolation(
                field="message_signature",
                message="The message signature does not match the message content.",
                value=message.message_signature,
                code=SIGNATURE_MISMATCH,
            )
        ]
