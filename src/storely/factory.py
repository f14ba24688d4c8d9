"""Store construction with default collaborators.

:func:`make_store` always returns a fresh store.  :func:`get_default_store`
is the opt-in shared instance: built on first use, the same object for the
rest of the process, never reset.
"""

from __future__ import annotations

import logging

from storely.config import StoreConfig
from storely.detection import IdentityChangeDetection
from storely.dispatch import LocalEventDispatcher
from storely.items import StoreItem
from storely.storage import DictStorage
from storely.store import Store

_logger = logging.getLogger(__name__)

_default_store: Store | None = None


def make_store(config: StoreConfig | None = None) -> Store:
    """Build a store, using fresh defaults for any collaborator *config* omits."""
    config = config or StoreConfig()
    store = Store(
        storage=config.storage if config.storage is not None else DictStorage(),
        change_detector=config.change_detector if config.change_detector is not None else IdentityChangeDetection(),
        event_dispatcher=config.event_dispatcher if config.event_dispatcher is not None else LocalEventDispatcher(),
        item_factory=config.item_factory if config.item_factory is not None else StoreItem,
        namespace=config.namespace,
    )
    _logger.debug("Created store namespace=%s", store.namespace)
    return store


def get_default_store() -> Store:
    """Return the process-wide shared store, creating it on first call."""
    global _default_store
    if _default_store is None:
        _default_store = make_store()
    return _default_store
