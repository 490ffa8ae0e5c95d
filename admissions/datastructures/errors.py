"""Exceptions raised by the bounded admissions heap.

Every error derives from :class:`HeapError` so callers can catch the whole
family at once, and from the built-in exception a plain Python container
would raise for the same situation.
"""

from __future__ import annotations


class HeapError(Exception):
    """Base class for all heap errors."""


class InvalidCapacityError(HeapError, ValueError):
    """Raised when a heap is constructed with a non-positive capacity."""


class QueueFullError(HeapError, OverflowError):
    """Raised when inserting into a heap whose slots are all occupied."""

    def __init__(self, message: str = "Warning: Full Admissions Queue!") -> None:
        super().__init__(message)


class NullRecordError(HeapError, TypeError):
    """Raised when ``None`` is offered as a record."""

    def __init__(self, message: str = "cannot insert a None record") -> None:
        super().__init__(message)


class EmptyQueueError(HeapError, IndexError):
    """Raised by peek/extract on an empty heap."""

    def __init__(self, message: str = "Warning: Empty Admissions Queue!") -> None:
        super().__init__(message)


class HeapIndexError(HeapError, IndexError):
    """Raised when a sift starts outside the occupied prefix (internal bug)."""
