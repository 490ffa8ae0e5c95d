"""
Configuration constants for the admissions tools.

This module centralizes the defaults used by the CLI and the desk:
- `DEFAULT_CAPACITY`: queue size when none is given (overridable through
  the ADMISSIONS_CAPACITY environment variable).
- `CSV_FIELDS`: column order for admission record files.
- `configure_logging`: one-shot logging setup for command-line use.
"""

import logging
import os

# Fallback capacity when neither --capacity nor the environment sets one
_BUILTIN_CAPACITY = 16

# Column order for reading and writing admission record CSV files
CSV_FIELDS = ("case_id", "name", "triage_level", "arrival", "complaint")
REQUIRED_FIELDS = ("case_id", "name", "triage_level", "arrival")

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _capacity_from_env(default: int = _BUILTIN_CAPACITY) -> int:
    """Read ADMISSIONS_CAPACITY, falling back to `default` if unset or invalid."""
    raw = os.environ.get("ADMISSIONS_CAPACITY")
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


DEFAULT_CAPACITY = _capacity_from_env()


def configure_logging(verbose: bool = False) -> None:
    """Install a stderr handler at WARNING, or DEBUG when `verbose` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
