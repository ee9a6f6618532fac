"""Type-keyed publish/subscribe of engine events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Callback = Callable[[Any], None]


@dataclass
class _Subscriber:
    id: int
    callback: Callback


class EventManager:
    """Keeps subscribers per event type and calls them on dispatch."""

    def __init__(self) -> None:
        self._subscribers: dict[type, list[_Subscriber]] = {}
        self._next_id = 0

    def init(self) -> None:
        """Drop every subscription and restart id numbering."""
        self._subscribers.clear()
        self._next_id = 0

    def subscribe(self, event_type: type, callback: Callback) -> int:
        """Register ``callback`` for events of exactly ``event_type``; return its id."""
        subscription_id = self._next_id
        self._next_id += 1
        self._subscribers.setdefault(event_type, []).append(
            _Subscriber(subscription_id, callback)
        )
        return subscription_id

    def unsubscribe(self, event_type: type, subscription_id: int) -> None:
        """Remove the subscription with this id from ``event_type``, if present."""
        subscribers = self._subscribers.get(event_type)
        if subscribers is not None:
            subscribers[:] = [s for s in subscribers if s.id != subscription_id]

    def dispatch(self, event: Any) -> None:
        """Call every subscriber of the event's type, in subscription order."""
        for subscriber in list(self._subscribers.get(type(event), ())):
            subscriber.callback(event)


class EventListenerComponent:
    """Holds at most one subscription per event type and releases them on close."""

    def __init__(self, event_manager: EventManager) -> None:
        self._event_manager = event_manager
        self._subscription_ids: dict[type, int] = {}

    def add_listener(self, event_type: type, callback: Callback) -> None:
        """Subscribe ``callback``, replacing any earlier listener for the type."""
        self.remove_listener(event_type)
        self._subscription_ids[event_type] = self._event_manager.subscribe(
            event_type, callback
        )

    def remove_listener(self, event_type: type) -> None:
        """Unsubscribe the listener for ``event_type``, if there is one."""
        subscription_id = self._subscription_ids.pop(event_type, None)
        if subscription_id is not None:
            self._event_manager.unsubscribe(event_type, subscription_id)

    def close(self) -> None:
        """Unsubscribe every listener held by this component."""
        for event_type, subscription_id in self._subscription_ids.items():
            self._event_manager.unsubscribe(event_type, subscription_id)
        self._subscription_ids.clear()

    def __enter__(self) -> EventListenerComponent:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()