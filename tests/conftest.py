from __future__ import annotations

from collections.abc import Callable

import pytest

from storely.config import StoreConfig
from storely.dispatch import LocalEventDispatcher
from storely.factory import make_store
from storely.storage import DictStorage
from storely.store import Store


class EventRecorder:
    """Collects ``(name, args)`` pairs from listeners."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def listener(self, name: str) -> Callable[..., None]:
        def record(*args: object) -> None:
            self.calls.append((name, args))

        return record

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def store() -> Store:
    return make_store()


@pytest.fixture
def storage() -> DictStorage:
    return DictStorage()


@pytest.fixture
def dispatcher() -> LocalEventDispatcher:
    return LocalEventDispatcher()


@pytest.fixture
def namespaced_store(storage: DictStorage, dispatcher: LocalEventDispatcher) -> Store:
    return make_store(StoreConfig(namespace="app", storage=storage, event_dispatcher=dispatcher))
