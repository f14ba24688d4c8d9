"""Synchronous, in-process event dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from storely.events import EventTopic

_logger = logging.getLogger(__name__)

Listener = Callable[..., None]
"""Any callable accepting the event payload positionally."""

EventListenerRemover = Callable[[], None]
"""Unregisters the listener it was returned for.  Safe to call more than once."""

ValueChangedListener = Callable[[Any, Any], None]
ValueRemovedListener = Callable[[Any], None]
ClearedListener = Callable[[], None]
ChangedListener = Callable[[], None]


@runtime_checkable
class EventDispatcher(Protocol):
    """Structural interface for the store's event transport."""

    def emit(self, topic: EventTopic, *args: Any) -> None: ...

    def on(self, topic: EventTopic, listener: Listener) -> EventListenerRemover: ...


@dataclass(slots=True, eq=False)
class _Subscription:
    """One registration of a listener.

    Compared by identity so the same callable registered twice yields two
    independently removable subscriptions.
    """

    topic: EventTopic
    listener: Listener
    active: bool = True


class LocalEventDispatcher:
    """Publish/subscribe table keyed by :class:`EventTopic`.

    Emission is a synchronous fan-out in registration order.  Listeners
    added or removed while an event is being delivered take effect from the
    next emission; a listener removed mid-delivery is not called.  Listener
    exceptions propagate to the emitter.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[EventTopic, list[_Subscription]] = {}

    def emit(self, topic: EventTopic, *args: Any) -> None:
        subscriptions = self._subscriptions.get(topic)
        if not subscriptions:
            return
        for subscription in list(subscriptions):
            if subscription.active:
                subscription.listener(*args)

    def on(self, topic: EventTopic, listener: Listener) -> EventListenerRemover:
        subscription = _Subscription(topic=topic, listener=listener)
        self._subscriptions.setdefault(topic, []).append(subscription)
        _logger.debug("Listener registered topic=%s listeners=%d", topic, self.listener_count(topic))

        def remove() -> None:
            self._unsubscribe(subscription)

        return remove

    def listener_count(self, topic: EventTopic) -> int:
        """Number of live registrations for *topic*."""
        return len(self._subscriptions.get(topic, ()))

    def _unsubscribe(self, subscription: _Subscription) -> None:
        if not subscription.active:
            return
        subscription.active = False
        subscriptions = self._subscriptions.get(subscription.topic, [])
        subscriptions.remove(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.topic, None)
        _logger.debug("Listener removed topic=%s", subscription.topic)
