"""The store: namespacing, change-gated mutation and event emission.

This is the only component that mutates stored state and the only one that
decides which events fire.  Everything runs synchronously: listeners are
called inside the mutating call and see the post-mutation state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from storely._redact import redact_for_log
from storely.events import EventTopic
from storely.exceptions import StorelyConfigError

if TYPE_CHECKING:
    from storely.detection import ValueChangeDetector
    from storely.dispatch import (
        ChangedListener,
        ClearedListener,
        EventDispatcher,
        EventListenerRemover,
        Listener,
        ValueChangedListener,
        ValueRemovedListener,
    )
    from storely.items import StoreItem, StoreItemFactory
    from storely.storage import StorageProvider

_logger = logging.getLogger(__name__)

_NAMESPACE_SEPARATOR = "-"


class Store:
    """Namespaced key-value store with change detection and events.

    Collaborators are injected already constructed; use
    :func:`storely.factory.make_store` to get one wired with defaults.

    Events:

    * ``set`` emits ``"{key}.valueChanged"`` with ``(new_value, previous_value)``
      when the change detector reports a change.
    * ``remove`` emits ``"{key}.valueRemoved"`` with ``(last_value)`` when the
      key existed.
    * ``clear`` emits ``"wasCleared"`` then ``"wasChanged"``.

    Keys in event topics are namespaced.  ``None`` is the absence marker
    returned by :meth:`get`; existence itself is decided by the storage
    provider's ``has``, so falsy values (``0``, ``""``, ``False``) are
    ordinary stored values.
    """

    def __init__(
        self,
        *,
        storage: StorageProvider,
        change_detector: ValueChangeDetector,
        event_dispatcher: EventDispatcher,
        item_factory: StoreItemFactory,
        namespace: str | None = None,
    ) -> None:
        if storage is None:
            raise StorelyConfigError("storage is required")
        if change_detector is None:
            raise StorelyConfigError("change_detector is required")
        if event_dispatcher is None:
            raise StorelyConfigError("event_dispatcher is required")
        if item_factory is None:
            raise StorelyConfigError("item_factory is required")
        self._storage = storage
        self._change_detector = change_detector
        self._event_dispatcher = event_dispatcher
        self._item_factory = item_factory
        self._namespace = namespace or None
        self._prefix = f"{namespace}{_NAMESPACE_SEPARATOR}" if namespace else ""

    @property
    def namespace(self) -> str | None:
        return self._namespace

    def _full_key(self, key: str) -> str:
        return self._prefix + key

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any, *, should_emit: bool = True) -> None:
        """Store *value* under *key* if the change detector reports a change.

        Unchanged writes are dropped: nothing is written and nothing fires.
        """
        full_key = self._full_key(key)
        previous_value = self._storage.get(full_key)
        if not self._change_detector.value_changed(value, previous_value):
            _logger.debug("Suppressed unchanged write key=%s", full_key)
            return

        self._storage.set(full_key, value)
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Stored key=%s value=%s", full_key, redact_for_log(value, key=full_key))
        if should_emit:
            self._event_dispatcher.emit(EventTopic.value_changed(full_key), value, previous_value)

    def remove(self, key: str, *, should_emit: bool = True) -> None:
        """Remove *key*.  Removing a missing key is a no-op."""
        self._remove_full_key(self._full_key(key), should_emit=should_emit)

    def _remove_full_key(self, full_key: str, *, should_emit: bool) -> None:
        if not self._storage.has(full_key):
            return
        last_value = self._storage.get(full_key)
        self._storage.remove(full_key)
        _logger.debug("Removed key=%s", full_key)
        if should_emit:
            self._event_dispatcher.emit(EventTopic.value_removed(full_key), last_value)

    def clear(self, *, should_emit: bool = True, should_emit_individually: bool = False) -> None:
        """Remove every entry held by the storage provider.

        By default this is a fast clear: one bulk wipe followed by the
        store-wide events only.  With *should_emit_individually* each key is
        removed on its own and fires its ``valueRemoved`` event first.
        With *should_emit* ``False`` nothing fires at all.
        """
        if should_emit and should_emit_individually:
            keys = self._storage.get_keys()
            _logger.debug("Clearing store individually keys=%d", len(keys))
            for full_key in keys:
                self._remove_full_key(full_key, should_emit=True)
        else:
            _logger.debug("Fast clearing store")
            self._storage.clear()

        if should_emit:
            self._event_dispatcher.emit(EventTopic.cleared())
            self._event_dispatcher.emit(EventTopic.changed())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, key: str, *, default: Any = None) -> Any:
        """Return the value stored under *key*.

        When the key is missing and *default* is not ``None``, the default
        is **written** with :meth:`set` (so a ``valueChanged`` event fires)
        and returned.  Otherwise a missing key yields ``None``.
        """
        full_key = self._full_key(key)
        if self._storage.has(full_key):
            return self._storage.get(full_key)
        if default is not None:
            self.set(key, default)
            return default
        return None

    def get_all(self) -> dict[str, Any]:
        """Shallow snapshot of every entry in the storage provider."""
        return dict(self._storage.get_all())

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def on_item_value_changed(self, key: str, listener: ValueChangedListener) -> EventListenerRemover:
        return self._event_dispatcher.on(EventTopic.value_changed(self._full_key(key)), listener)

    def on_item_value_removed(self, key: str, listener: ValueRemovedListener) -> EventListenerRemover:
        return self._event_dispatcher.on(EventTopic.value_removed(self._full_key(key)), listener)

    def on_cleared(self, listener: ClearedListener) -> EventListenerRemover:
        return self._event_dispatcher.on(EventTopic.cleared(), listener)

    def on_changed(self, listener: ChangedListener) -> EventListenerRemover:
        return self._event_dispatcher.on(EventTopic.changed(), listener)

    def emit(self, event_name: str, *args: Any) -> None:
        """Emit a caller-defined event through the store's dispatcher.

        Custom events live under their own topic kind and never collide
        with the store's own events.
        """
        self._event_dispatcher.emit(EventTopic.custom(event_name), *args)

    def on(self, event_name: str, listener: Listener) -> EventListenerRemover:
        return self._event_dispatcher.on(EventTopic.custom(event_name), listener)

    @staticmethod
    def merge_event_removers(*removers: EventListenerRemover) -> EventListenerRemover:
        """Combine *removers* into one that calls each in the given order."""

        def remove_all() -> None:
            for remover in removers:
                remover()

        return remove_all

    # ------------------------------------------------------------------
    # Item handles
    # ------------------------------------------------------------------

    def get_item(self, key: str, *, default: Any = None) -> StoreItem:
        """Return a handle bound to *key*; see :class:`storely.items.StoreItem`."""
        return self._item_factory(self, key, default=default)

    def __repr__(self) -> str:
        return f"Store(namespace={self._namespace!r})"
