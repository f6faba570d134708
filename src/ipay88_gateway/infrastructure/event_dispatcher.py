from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ipay88_gateway.application.ports import EventDispatcher

if TYPE_CHECKING:
    from ipay88_gateway.domain.messages import Message

Listener = Callable[[str, "Message", Mapping[str, Any]], None]


class InMemoryEventDispatcher(EventDispatcher):
    """Synchronous dispatcher calling registered listeners in order.

    Listener exceptions propagate to the client call that published the
    event. Registration is NOT thread-safe; register listeners at startup.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def add_listener(self, event_name: str, listener: Listener) -> None:
        self._listeners[event_name].append(listener)

    def listeners(self, event_name: str) -> list[Listener]:
        return list(self._listeners.get(event_name, ()))

    def dispatch(self, event_name: str, message: Message, arguments: Mapping[str, Any]) -> None:
        for listener in self.listeners(event_name):
            listener(event_name, message, arguments)
