from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType

import httpx

from ipay88_gateway.application.ports import Transport, TransportResponse

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpxTransport(Transport):
    """Production transport posting form-encoded bodies with httpx.

    The transport closes only the httpx client it created itself; a client
    passed in by the caller stays open. Network errors (httpx.HTTPError)
    propagate unchanged.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def execute(self, method: str, url: str, form_body: Mapping[str, str]) -> TransportResponse:
        response = self._client.request(method, url, data=dict(form_body))
        return TransportResponse(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=response.text,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
