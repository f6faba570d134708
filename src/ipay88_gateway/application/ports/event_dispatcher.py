from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ipay88_gateway.domain.messages import Message


class EventDispatcher(ABC):
    """Port for publishing message events.

    The client publishes when a message is created and when validation
    reports violations. Having no dispatcher is a no-op, never an error.
    """

    @abstractmethod
    def dispatch(self, event_name: str, message: Message, arguments: Mapping[str, Any]) -> None:
        """Publish ``event_name`` about ``message``.

        Listeners may inspect (and mutate) the message; the client keeps
        using the same instance afterwards.
        """
