"""Item handles: a store view bound to one key."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from storely.exceptions import StorelyConfigError

if TYPE_CHECKING:
    from storely.dispatch import EventListenerRemover, ValueChangedListener, ValueRemovedListener
    from storely.store import Store


class StoreItemFactory(Protocol):
    """Callable building an item handle; :class:`StoreItem` itself qualifies."""

    def __call__(self, store: Store, key: str, *, default: Any = None) -> StoreItem: ...


class StoreItem:
    """Manages a single key by delegating every call to its store.

    Handles hold no state of their own, so any number of them may exist for
    the same key and they always agree with the store.

    Parameters
    ----------
    store : Store
        The owning store.  Namespacing, change detection and dispatch rules
        are the store's.
    key : str
        The (un-namespaced) key this handle manages.
    default : Any
        When not ``None``, written to the key on construction (subject to
        change detection, so an existing equal value is left untouched).
    """

    def __init__(self, store: Store, key: str, *, default: Any = None) -> None:
        if store is None:
            raise StorelyConfigError("store is required")
        if not key:
            raise StorelyConfigError("key is required")
        self._store = store
        self._key = key
        if default is not None:
            self.set_value(default)

    @property
    def key(self) -> str:
        return self._key

    def get_value(self, *, default: Any = None) -> Any:
        """Return the current value; see :meth:`Store.get` for *default*."""
        return self._store.get(self._key, default=default)

    def set_value(self, value: Any, *, should_emit: bool = True) -> None:
        self._store.set(self._key, value, should_emit=should_emit)

    def remove(self, *, should_emit: bool = True) -> None:
        self._store.remove(self._key, should_emit=should_emit)

    def on_value_changed(self, listener: ValueChangedListener) -> EventListenerRemover:
        return self._store.on_item_value_changed(self._key, listener)

    def on_removed(self, listener: ValueRemovedListener) -> EventListenerRemover:
        return self._store.on_item_value_removed(self._key, listener)

    def __repr__(self) -> str:
        return f"StoreItem(key={self._key!r}, namespace={self._store.namespace!r})"
