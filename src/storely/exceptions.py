"""Custom exception hierarchy for storely."""

from __future__ import annotations


class StorelyError(Exception):
    """Base exception for all storely errors."""


class StorelyConfigError(StorelyError):
    """Invalid or missing configuration.

    Raised when a store is built without one of its collaborators, when an
    item handle is built without a store or key, or when environment
    configuration holds an unsupported value.
    """
