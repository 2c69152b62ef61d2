"""Storage modules for request history."""

from eventmail.stores.history import RequestHistory

__all__ = ["RequestHistory"]
