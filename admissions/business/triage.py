"""Admissions desk: the triage workflow on top of the bounded heap.

The desk admits records until the waiting room is full, turns the rest
away (keeping them for reporting), and calls patients in priority order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..datastructures import BoundedMinHeap, QueueFullError
from ..settings import DEFAULT_CAPACITY
from .records import AdmissionRecord

logger = logging.getLogger(__name__)


class AdmissionsDesk:
    """Fixed-size waiting room ordered by triage level, then arrival."""

    __slots__ = ("_queue", "turned_away")

    def __init__(self, capacity: Optional[int] = None) -> None:
        self._queue: BoundedMinHeap[AdmissionRecord] = BoundedMinHeap(
            DEFAULT_CAPACITY if capacity is None else capacity
        )
        self.turned_away: List[AdmissionRecord] = []

    def admit(self, record: AdmissionRecord) -> bool:
        """Queue `record`; return False (and remember it) if the room is full."""
        try:
            self._queue.insert(record)
        except QueueFullError:
            self.turned_away.append(record)
            logger.warning(
                "queue full (%d/%d), turned away %s",
                self._queue.size(), self._queue.capacity(), record.case_id,
            )
            return False
        logger.info("admitted %s at triage %d", record.case_id, record.triage_level)
        return True

    def admit_all(self, records: Iterable[AdmissionRecord]) -> int:
        """Admit each record in turn; return how many got a place."""
        accepted = 0
        for r in records:
            if self.admit(r):
                accepted += 1
        return accepted

    def next_patient(self) -> AdmissionRecord:
        """Remove and return the most urgent patient (EmptyQueueError if none)."""
        record = self._queue.extract_min()
        logger.info("calling %s", record.case_id)
        return record

    def peek_next(self) -> AdmissionRecord:
        return self._queue.peek()

    def waiting(self) -> int:
        return self._queue.size()

    def capacity(self) -> int:
        return self._queue.capacity()

    def is_full(self) -> bool:
        return self._queue.is_full()

    def discharge_all(self) -> List[AdmissionRecord]:
        """Call everyone still waiting, most urgent first."""
        out: List[AdmissionRecord] = []
        while not self._queue.is_empty():
            out.append(self.next_patient())
        return out

    def roster(self) -> str:
        """Waiting patients in call order, one per line."""
        return self._queue.render()

    def reset(self) -> None:
        self._queue.clear()
        self.turned_away = []
