from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

HTTP_OK = 200


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Outcome of one HTTP exchange with the gateway."""

    status_code: int
    reason_phrase: str
    body: str | Mapping[str, Any]

    @property
    def is_success(self) -> bool:
        return self.status_code == HTTP_OK


class Transport(ABC):
    """Port for the HTTP exchange with the gateway.

    Contract:
    - execute() sends ``form_body`` form-encoded and blocks until the gateway
      answers; it is the only suspension point of a request/response cycle
    - Non-success statuses are returned, not raised; the client decides
    - Timeouts and cancellation belong to the implementation
    """

    @abstractmethod
    def execute(self, method: str, url: str, form_body: Mapping[str, str]) -> TransportResponse:
        """Send a request to the gateway.

        Args:
            method: HTTP method, e.g. "POST".
            url: Absolute gateway URL.
            form_body: Wire fields of the outbound message.

        Returns:
            The status code, reason phrase and raw body of the answer.
        """
