"""Bounded priority queue for triage admissions."""

from .datastructures import BoundedMinHeap
from .business import AdmissionRecord, AdmissionsDesk

__all__ = ["BoundedMinHeap", "AdmissionRecord", "AdmissionsDesk"]

__version__ = "0.1.0"
