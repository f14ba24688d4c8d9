"""Store configuration for storely."""

from __future__ import annotations

import dataclasses
import os
from typing import TYPE_CHECKING, Any

from storely.detection import EqualityChangeDetection, IdentityChangeDetection
from storely.exceptions import StorelyConfigError

if TYPE_CHECKING:
    from storely.detection import ValueChangeDetector
    from storely.dispatch import EventDispatcher
    from storely.items import StoreItemFactory
    from storely.storage import StorageProvider

_CHANGE_DETECTORS: dict[str, type[IdentityChangeDetection] | type[EqualityChangeDetection]] = {
    "identity": IdentityChangeDetection,
    "equality": EqualityChangeDetection,
}


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Construction options for a store.

    Every field is optional; :func:`storely.factory.make_store` fills the
    gaps with fresh defaults.

    Parameters
    ----------
    namespace : str or None
        Prefix applied to every key as ``"{namespace}-{key}"``.
    storage : StorageProvider or None
        Raw key/value persistence.  Defaults to a new ``DictStorage``.
    change_detector : ValueChangeDetector or None
        Decides whether a write is a change.  Defaults to
        ``IdentityChangeDetection``.
    event_dispatcher : EventDispatcher or None
        Event transport.  Defaults to a new ``LocalEventDispatcher``.
    item_factory : StoreItemFactory or None
        Builds item handles.  Defaults to ``StoreItem``.
    """

    namespace: str | None = None
    storage: StorageProvider | None = None
    change_detector: ValueChangeDetector | None = None
    event_dispatcher: EventDispatcher | None = None
    item_factory: StoreItemFactory | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``STORELY_NAMESPACE`` and ``STORELY_CHANGE_DETECTION``
        (``identity`` or ``equality``).  Explicit keyword arguments
        override environment values.

        Raises
        ------
        StorelyConfigError
            If ``STORELY_CHANGE_DETECTION`` names an unknown detector.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        namespace = env.get("STORELY_NAMESPACE")
        if namespace is not None and "namespace" not in overrides:
            config_kwargs["namespace"] = namespace.strip() or None

        detection = env.get("STORELY_CHANGE_DETECTION")
        if detection is not None and "change_detector" not in overrides:
            normalized = detection.strip().lower()
            detector_cls = _CHANGE_DETECTORS.get(normalized)
            if detector_cls is None:
                raise StorelyConfigError(
                    f"Unknown STORELY_CHANGE_DETECTION {detection!r}; expected one of {sorted(_CHANGE_DETECTORS)}"
                )
            config_kwargs["change_detector"] = detector_cls()

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
