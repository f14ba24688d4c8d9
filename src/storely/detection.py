"""Value change detection strategies.

A detector decides whether a write is "real": only writes it reports as
changed are stored and announced.  Detectors must be pure.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Values compared by value rather than by identity.
_PRIMITIVE_TYPES: tuple[type, ...] = (type(None), bool, int, float, complex, str, bytes)


@runtime_checkable
class ValueChangeDetector(Protocol):
    """Protocol for deciding whether *new_value* differs from *previous_value*."""

    def value_changed(self, new_value: Any, previous_value: Any) -> bool: ...


def _is_primitive(value: Any) -> bool:
    return isinstance(value, _PRIMITIVE_TYPES)


class IdentityChangeDetection:
    """The default detector: strict inequality.

    Primitives are compared by type and value, so ``1`` -> ``True`` or
    ``1`` -> ``1.0`` count as changes.  Containers and other objects are
    compared by identity: writing back the same (possibly mutated) dict is
    not a change, writing an equal but distinct dict is.
    """

    def value_changed(self, new_value: Any, previous_value: Any) -> bool:
        if _is_primitive(new_value) and _is_primitive(previous_value):
            if type(new_value) is not type(previous_value):
                return True
            return bool(new_value != previous_value)
        return new_value is not previous_value


class EqualityChangeDetection:
    """Structural detector: changed when the values compare unequal.

    Useful for stores holding freshly built dicts/lists/models where an
    identical rebuild should not notify subscribers.
    """

    def value_changed(self, new_value: Any, previous_value: Any) -> bool:
        if type(new_value) is not type(previous_value):
            return True
        return bool(new_value != previous_value)
