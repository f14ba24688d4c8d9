"""Typed event topics.

Every notification the store sends is addressed by an :class:`EventTopic`:
a kind plus, for per-key and custom events, the key (or event name) it is
about.  The topic's ``identifier`` is the flat routing string
(``"user-name.valueChanged"``, ``"wasCleared"``, ...) for dispatchers that
route by string.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

CUSTOM_EVENT_PREFIX = "customEvent"


class StoreEventKind(StrEnum):
    VALUE_CHANGED = "valueChanged"
    VALUE_REMOVED = "valueRemoved"
    CLEARED = "wasCleared"
    CHANGED = "wasChanged"
    CUSTOM = "customEvent"

    @property
    def is_keyed(self) -> bool:
        """Whether topics of this kind are scoped to a key (or event name)."""
        return self in _KEYED_KINDS


_KEYED_KINDS = frozenset({StoreEventKind.VALUE_CHANGED, StoreEventKind.VALUE_REMOVED, StoreEventKind.CUSTOM})


class EventTopic(BaseModel):
    """Routing key for the event dispatch table.

    ``key`` holds the already-namespaced storage key for per-key kinds and
    the caller's event name for :attr:`StoreEventKind.CUSTOM`.  Store-wide
    kinds carry no key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: StoreEventKind
    key: str | None = None

    @model_validator(mode="after")
    def _check_key(self) -> EventTopic:
        if self.kind.is_keyed and self.key is None:
            raise ValueError(f"{self.kind.name} topics require a key")
        if not self.kind.is_keyed and self.key is not None:
            raise ValueError(f"{self.kind.name} topics are store-wide and take no key")
        return self

    @classmethod
    def value_changed(cls, key: str) -> EventTopic:
        return cls(kind=StoreEventKind.VALUE_CHANGED, key=key)

    @classmethod
    def value_removed(cls, key: str) -> EventTopic:
        return cls(kind=StoreEventKind.VALUE_REMOVED, key=key)

    @classmethod
    def cleared(cls) -> EventTopic:
        return cls(kind=StoreEventKind.CLEARED)

    @classmethod
    def changed(cls) -> EventTopic:
        return cls(kind=StoreEventKind.CHANGED)

    @classmethod
    def custom(cls, name: str) -> EventTopic:
        return cls(kind=StoreEventKind.CUSTOM, key=name)

    @property
    def identifier(self) -> str:
        """Flat string form of the topic."""
        if self.kind is StoreEventKind.CUSTOM:
            return f"{CUSTOM_EVENT_PREFIX}-{self.key}"
        if self.kind.is_keyed:
            return f"{self.key}.{self.kind.value}"
        return self.kind.value

    def __str__(self) -> str:
        return self.identifier
