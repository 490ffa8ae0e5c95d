"""Admission records: the payload ordered by the admissions heap.

A record's priority is its triage level on the five-level Emergency
Severity Index (1 = resuscitation, 5 = non-urgent); among equal levels,
whoever arrived first goes first.
"""

from __future__ import annotations

from typing import Any, Mapping

MIN_TRIAGE_LEVEL = 1
MAX_TRIAGE_LEVEL = 5


def _required_int(row: Mapping[str, Any], field: str) -> int:
    # short CSV rows come back from DictReader with None for the missing cells
    raw = row.get(field)
    if raw is None or not str(raw).strip():
        raise ValueError(f"{field} is required")
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValueError(f"{field} must be an integer, got {raw!r}") from None


class AdmissionRecord:
    """One patient waiting for admission.

    Ordering is defined only through :meth:`compare_to`; equality stays
    identity-based because two patients with the same triage level and
    arrival are still different people.
    """

    __slots__ = ("case_id", "name", "triage_level", "arrival", "complaint")

    def __init__(self, case_id: str, name: str, triage_level: int, arrival: int, complaint: str = "") -> None:
        if not case_id:
            raise ValueError("case_id must be non-empty")
        if isinstance(triage_level, bool) or not isinstance(triage_level, int):
            raise ValueError(f"triage_level must be an int, got {triage_level!r}")
        if not (MIN_TRIAGE_LEVEL <= triage_level <= MAX_TRIAGE_LEVEL):
            raise ValueError(
                f"triage_level must be in [{MIN_TRIAGE_LEVEL}, {MAX_TRIAGE_LEVEL}], got {triage_level}"
            )
        if isinstance(arrival, bool) or not isinstance(arrival, int) or arrival < 0:
            raise ValueError(f"arrival must be a non-negative int, got {arrival!r}")
        self.case_id = case_id
        self.name = name
        self.triage_level = triage_level
        self.arrival = arrival
        self.complaint = complaint

    # -----------------------------
    # Ordering
    # -----------------------------
    def _key(self) -> tuple[int, int]:
        return (self.triage_level, self.arrival)

    def compare_to(self, other: "AdmissionRecord") -> int:
        """Three-way comparison: -1 if self goes first, 1 if other does, else 0."""
        a, b = self._key(), other._key()
        return (a > b) - (a < b)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, AdmissionRecord):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, AdmissionRecord):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, AdmissionRecord):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, AdmissionRecord):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -----------------------------
    # Conversion
    # -----------------------------
    def to_row(self) -> dict[str, Any]:
        """Return a dict keyed by the CSV column names."""
        return {
            "case_id": self.case_id,
            "name": self.name,
            "triage_level": self.triage_level,
            "arrival": self.arrival,
            "complaint": self.complaint,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AdmissionRecord":
        """Parse one CSV row (strings) into a record.

        Raises:
            ValueError: if a numeric field does not parse or is out of range.
        """
        return cls(
            case_id=(row.get("case_id") or "").strip(),
            name=(row.get("name") or "").strip(),
            triage_level=_required_int(row, "triage_level"),
            arrival=_required_int(row, "arrival"),
            complaint=(row.get("complaint") or "").strip(),
        )

    def __str__(self) -> str:
        parts = [self.case_id, self.name, f"triage {self.triage_level}", f"arrival {self.arrival}"]
        if self.complaint:
            parts.append(self.complaint)
        return " | ".join(parts)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"AdmissionRecord({self.case_id!r}, {self.name!r}, "
            f"triage_level={self.triage_level}, arrival={self.arrival})"
        )
