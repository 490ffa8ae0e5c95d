from .record_loader import load_records, write_records

__all__ = ["load_records", "write_records"]
