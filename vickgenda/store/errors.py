"""Errors raised by the persistence stores."""

from __future__ import annotations


class StoreError(Exception):
    """A storage operation failed."""


class NotFoundError(StoreError, LookupError):
    """The requested record does not exist."""