"""Helpers for safe debug logging.

Stores frequently hold credentials, tokens and large blobs.  Values pass
through :func:`redact_for_log` before the store emits DEBUG logs so
secrets and megabyte payloads never reach log handlers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_SENSITIVE_KEY_MARKERS: tuple[str, ...] = (
    "password",
    "passwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "authorization",
    "cookie",
    "credential",
    "session",
)


def is_sensitive_key(key: str) -> bool:
    """Return ``True`` when *key* looks like it names a secret."""
    lowered = key.lower()
    return any(marker in lowered for marker in _SENSITIVE_KEY_MARKERS)


def redact_for_log(value: Any, *, key: str | None = None, max_string: int = 128, _depth: int = 0) -> Any:
    """Return a redacted copy of *value* suitable for debug logs.

    When *key* names a secret the whole value is masked.
    """
    if key is not None and is_sensitive_key(key):
        return "<redacted>"

    if _depth > 5:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {
            str(k): redact_for_log(v, key=str(k), max_string=max_string, _depth=_depth + 1)
            for k, v in value.items()
        }

    if isinstance(value, Sequence):
        return [redact_for_log(v, max_string=max_string, _depth=_depth + 1) for v in value]

    # Unknown objects are represented by type only.
    return f"<{type(value).__name__}>"
