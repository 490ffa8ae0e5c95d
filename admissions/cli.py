"""
Admissions Command-Line Interface (CLI)

This script exposes the triage queue via subcommands. It ties together:
- Record loading/export (CSV)
- The admissions desk (bounded priority queue + turned-away list)

Usage examples:
    python -m admissions.cli triage --path patients.csv --capacity 10
    python -m admissions.cli triage --path patients.csv --take 3
    python -m admissions.cli roster --path patients.csv
    python -m admissions.cli export --path patients.csv --out called.csv
"""

import argparse
import logging
import sys

from .business.triage import AdmissionsDesk
from .dao import record_loader
from .settings import DEFAULT_CAPACITY, configure_logging

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: build a desk from a CSV file
# -------------------------------------------------------------------
def load_desk(path, capacity):
    """Read records from `path` and admit them into a new desk."""
    records = record_loader.load_records(path)
    desk = AdmissionsDesk(capacity)
    accepted = desk.admit_all(records)
    logger.debug("loaded %d records from %s, %d admitted", len(records), path, accepted)
    return desk


def print_turned_away(desk):
    if desk.turned_away:
        print(f"Turned away ({len(desk.turned_away)}):")
        for r in desk.turned_away:
            print(f"  {r}")


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_triage(args):
    """Call the next `--take` patients (default: everyone) in priority order."""
    desk = load_desk(args.path, args.capacity)
    if desk.waiting() == 0:
        print("No patients waiting.")
    else:
        take = desk.waiting() if args.take is None else min(args.take, desk.waiting())
        print("Call order (most urgent first):")
        for rank in range(1, take + 1):
            print(f"  {rank}. {desk.next_patient()}")
        if desk.waiting():
            print(f"Still waiting: {desk.waiting()}")
    print_turned_away(desk)


def cmd_roster(args):
    """Print the waiting room without calling anyone."""
    desk = load_desk(args.path, args.capacity)
    roster = desk.roster()
    print(roster if roster else "No patients waiting.")
    print_turned_away(desk)


def cmd_export(args):
    """Write admitted records to a CSV in call order."""
    desk = load_desk(args.path, args.capacity)
    n = record_loader.write_records(args.out, desk.discharge_all())
    print(f"Exported {n} records to {args.out}")
    print_turned_away(desk)


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m admissions.cli", description="Triage Admissions CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("triage", help="Admit records and call them in priority order")
    s.add_argument("--path", required=True)
    s.add_argument("--capacity", type=positive_int, default=DEFAULT_CAPACITY)
    s.add_argument("--take", type=positive_int, default=None)
    s.set_defaults(func=cmd_triage)

    s = sub.add_parser("roster", help="Show the waiting room in priority order")
    s.add_argument("--path", required=True)
    s.add_argument("--capacity", type=positive_int, default=DEFAULT_CAPACITY)
    s.set_defaults(func=cmd_roster)

    s = sub.add_parser("export", help="Write admitted records to CSV in call order")
    s.add_argument("--path", required=True)
    s.add_argument("--out", required=True)
    s.add_argument("--capacity", type=positive_int, default=DEFAULT_CAPACITY)
    s.set_defaults(func=cmd_export)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m admissions.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
