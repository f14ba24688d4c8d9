"""storely - namespaced in-memory key-value store with change events."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("storely")
except PackageNotFoundError:
    __version__ = "0+local"
from storely.config import StoreConfig
from storely.detection import EqualityChangeDetection, IdentityChangeDetection, ValueChangeDetector
from storely.dispatch import EventDispatcher, EventListenerRemover, LocalEventDispatcher
from storely.events import EventTopic, StoreEventKind
from storely.exceptions import StorelyConfigError, StorelyError
from storely.factory import get_default_store, make_store
from storely.items import StoreItem, StoreItemFactory
from storely.storage import DictStorage, StorageProvider
from storely.store import Store

__all__ = [
    "__version__",
    "DictStorage",
    "EqualityChangeDetection",
    "EventDispatcher",
    "EventListenerRemover",
    "EventTopic",
    "IdentityChangeDetection",
    "LocalEventDispatcher",
    "StorageProvider",
    "Store",
    "StoreConfig",
    "StoreEventKind",
    "StoreItem",
    "StoreItemFactory",
    "StorelyConfigError",
    "StorelyError",
    "ValueChangeDetector",
    "get_default_store",
    "make_store",
]
