from .heap import BoundedMinHeap
from .errors import (
    HeapError,
    InvalidCapacityError,
    QueueFullError,
    NullRecordError,
    EmptyQueueError,
    HeapIndexError,
)

__all__ = [
    "BoundedMinHeap",
    "HeapError",
    "InvalidCapacityError",
    "QueueFullError",
    "NullRecordError",
    "EmptyQueueError",
    "HeapIndexError",
]
