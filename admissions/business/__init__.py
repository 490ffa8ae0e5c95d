from .records import AdmissionRecord
from .triage import AdmissionsDesk

__all__ = ["AdmissionRecord", "AdmissionsDesk"]
