from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import (
    EmptyQueueError,
    HeapIndexError,
    InvalidCapacityError,
    NullRecordError,
    QueueFullError,
)

logger = logging.getLogger(__name__)


T = TypeVar("T")

Compare = Callable[[Any, Any], int]


class BoundedMinHeap(Generic[T]):
    """A fixed-capacity, array-backed binary min-heap.

    Implementation notes
    --------------------
    • Storage is a list of ``capacity`` slots allocated once; it never grows.
    • Occupied slots are exactly ``0 .. size-1``; empty slots hold ``None``.
    • Every occupied slot ``i > 0`` is >= its parent ``(i - 1) // 2``, so
      slot 0 always holds a minimum record.
    • Records are ordered with ``<`` unless a three-way ``compare(a, b)``
      callable is given (negative / zero / positive).
    • Ties carry no meaning: equal records come out in no particular order.
    """

    __slots__ = ("_slots", "_size", "_compare")

    def __init__(self, capacity: int, compare: Optional[Compare] = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(f"capacity has to be a positive integer, got {capacity!r}")
        self._slots: List[Optional[T]] = [None] * capacity
        self._size: int = 0
        self._compare: Optional[Compare] = compare

    @classmethod
    def from_iterable(
        cls,
        records: Iterable[T],
        capacity: Optional[int] = None,
        compare: Optional[Compare] = None,
    ) -> "BoundedMinHeap[T]":
        """Build a heap from ``records`` in O(n) instead of repeated inserts.

        ``capacity`` defaults to the number of records.

        Raises:
            NullRecordError: if any record is ``None``.
            QueueFullError: if there are more records than ``capacity``.
            InvalidCapacityError: if the resulting capacity is not positive.
        """
        items = list(records)
        for item in items:
            if item is None:
                raise NullRecordError()
        if capacity is None:
            capacity = len(items)
        heap: BoundedMinHeap[T] = cls(capacity, compare)
        if len(items) > capacity:
            raise QueueFullError(
                f"Warning: Full Admissions Queue! {len(items)} records for {capacity} slots"
            )
        heap._slots[: len(items)] = items
        heap._size = len(items)
        heap._heapify()
        logger.debug("built heap of %d/%d records", heap._size, capacity)
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _less(self, a: T, b: T) -> bool:
        if self._compare is not None:
            return self._compare(a, b) < 0
        return a < b

    def _check_index(self, idx: int) -> None:
        if idx < 0 or idx >= self._size:
            raise HeapIndexError(f"index {idx} out of range for heap of size {self._size}")

    # Both sifts finish every comparison before moving a slot, so a
    # comparison that raises leaves the slots untouched.
    def _sift_up(self, idx: int) -> None:
        self._check_index(idx)
        slots = self._slots
        item = slots[idx]
        target = idx
        while target > 0:
            parent = (target - 1) // 2
            if not self._less(item, slots[parent]):
                break
            target = parent
        while idx > target:
            parent = (idx - 1) // 2
            slots[idx] = slots[parent]
            idx = parent
        slots[target] = item

    def _sift_down(self, idx: int) -> None:
        self._check_index(idx)
        slots = self._slots
        n = self._size
        item = slots[idx]
        path: List[int] = []
        pos = idx
        while True:
            left = 2 * pos + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._less(slots[right], slots[left]):
                child = right
            if not self._less(slots[child], item):
                break
            path.append(child)
            pos = child
        for child in path:
            slots[(child - 1) // 2] = slots[child]
        slots[pos] = item

    def _heapify(self) -> None:
        """Restore the heap order over the occupied prefix in O(n) time."""
        for i in reversed(range(self._size // 2)):
            self._sift_down(i)

    # -----------------------------
    # Introspection
    # -----------------------------
    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._slots)

    def clear(self) -> None:
        """Drop every record. Capacity is kept."""
        for i in range(len(self._slots)):
            self._slots[i] = None
        logger.debug("cleared heap of %d records", self._size)
        self._size = 0

    # -----------------------------
    # Public API
    # -----------------------------
    def peek(self) -> T:
        """Return the smallest record without removing it (O(1))."""
        if self._size == 0:
            raise EmptyQueueError()
        return self._slots[0]  # type: ignore[return-value]

    def insert(self, record: T) -> None:
        """Add ``record`` and sift it up into place (O(log n)).

        Raises:
            NullRecordError: if ``record`` is ``None``.
            QueueFullError: if every slot is occupied.
        """
        if record is None:
            raise NullRecordError()
        if self._size == len(self._slots):
            raise QueueFullError()
        self._slots[self._size] = record
        self._size += 1
        try:
            self._sift_up(self._size - 1)
        except Exception:
            # record could not be ordered against the others; take it back out
            self._size -= 1
            self._slots[self._size] = None
            raise

    push = insert

    def extract_min(self) -> T:
        """Remove and return the smallest record (O(log n)).

        The last occupied slot moves into the root and is sifted down, which
        keeps the tree shape intact across any number of extractions.
        """
        if self._size == 0:
            raise EmptyQueueError()
        slots = self._slots
        top = slots[0]
        last = self._size - 1
        slots[0] = slots[last]
        slots[last] = None
        self._size = last
        if self._size > 0:
            try:
                self._sift_down(0)
            except Exception:
                slots[last] = slots[0]
                slots[0] = top
                self._size = last + 1
                raise
        return top  # type: ignore[return-value]

    pop = extract_min

    def replace(self, record: T) -> T:
        """Pop and return the smallest record, then insert ``record`` (O(log n)).

        Works on a full heap since the count does not change.
        """
        if record is None:
            raise NullRecordError()
        if self._size == 0:
            raise EmptyQueueError()
        top = self._slots[0]
        self._slots[0] = record
        try:
            self._sift_down(0)
        except Exception:
            self._slots[0] = top
            raise
        return top  # type: ignore[return-value]

    def pushpop(self, record: T) -> T:
        """Insert ``record`` then pop the smallest in a single O(log n) step."""
        if record is None:
            raise NullRecordError()
        if self._size and self._less(self._slots[0], record):
            top = self._slots[0]
            self._slots[0] = record
            try:
                self._sift_down(0)
            except Exception:
                self._slots[0] = top
                raise
            return top  # type: ignore[return-value]
        return record

    def copy(self) -> "BoundedMinHeap[T]":
        """Return an independent heap sharing the same record references.

        The whole slot list is copied (empty tail included); records
        themselves are not duplicated.
        """
        dup: BoundedMinHeap[T] = BoundedMinHeap(len(self._slots), self._compare)
        dup._slots = list(self._slots)
        dup._size = self._size
        logger.debug("copied heap of %d/%d records", self._size, len(self._slots))
        return dup

    __copy__ = copy

    def render(self) -> str:
        """List every record from smallest to greatest, one per line.

        Drains a copy, so the receiver is left untouched. Empty heap gives "".
        """
        dup = self.copy()
        lines = []
        while not dup.is_empty():
            lines.append(str(dup.extract_min()))
        return "\n".join(lines).strip()

    def slots_copy(self) -> List[Optional[T]]:
        """Copy of the full backing slot list, for structural checks in tests."""
        return list(self._slots)

    def to_list(self) -> List[T]:
        return list(self._slots[: self._size])  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[T]:
        # Heap (array) order, not sorted order
        for i in range(self._size):
            yield self._slots[i]  # type: ignore[misc]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"BoundedMinHeap(capacity={len(self._slots)}, {self.to_list()!r})"
