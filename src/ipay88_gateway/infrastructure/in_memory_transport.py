from __future__ import annotations

from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass

from ipay88_gateway.application.ports import HTTP_OK, Transport, TransportResponse


@dataclass(frozen=True, slots=True)
class RecordedCall:
    method: str
    url: str
    form_body: dict[str, str]


class InMemoryTransport(Transport):
    """Transport answering from a queue of canned responses.

    Use this for tests and offline runs:
    - queue() appends a response; execute() consumes them in FIFO order
    - Every execute() is recorded in ``calls``
    - An empty queue answers 200 with an empty body

    NOT thread-safe.
    """

    def __init__(self, *responses: TransportResponse) -> None:
        self._responses: deque[TransportResponse] = deque(responses)
        self.calls: list[RecordedCall] = []

    def queue(self, body: str | Mapping[str, str], status_code: int = HTTP_OK, reason_phrase: str = "OK") -> None:
        self._responses.append(TransportResponse(status_code, reason_phrase, body))

    def execute(self, method: str, url: str, form_body: Mapping[str, str]) -> TransportResponse:
        self.calls.append(RecordedCall(method, url, dict(form_body)))
        if not self._responses:
            return TransportResponse(HTTP_OK, "OK", "")
        return self._responses.popleft()
