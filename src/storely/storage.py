"""Storage providers: raw key -> value persistence.

Providers know nothing about namespaces, events or change detection; the
store hands them fully qualified keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StorageProvider(Protocol):
    """Structural interface the store persists through.

    ``get`` returns ``None`` for a missing key; use ``has`` to tell a
    missing key from a stored ``None``.  ``get_all`` and ``get_keys`` must
    return copies the caller may mutate freely.
    """

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def get_all(self) -> dict[str, Any]: ...

    def get_keys(self) -> list[str]: ...

    def has(self, key: str) -> bool: ...


class DictStorage:
    """In-memory storage backed by a plain dict.  Data is lost on process exit."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial) if initial else {}

    def get(self, key: str) -> Any:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data = {}

    def get_all(self) -> dict[str, Any]:
        return dict(self._data)

    def get_keys(self) -> list[str]:
        return list(self._data)

    def has(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
