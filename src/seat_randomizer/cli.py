"""Command line interface for SeatRandomizer."""
from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Sequence

from .display import seat_chart, to_dataframe
from .logging_setup import setup_logging
from .solver import assign_seats
from .text_loader import load_all

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Random seat assignment with reserved seats")
    parser.add_argument("--names", required=True, type=Path,
                        help="Student names, one per line (.txt) or a 'name' column (.csv).")
    parser.add_argument("--reservations", type=Path,
                        help="Reserved seats as name:seat lines (.txt) or name,seat columns (.csv).")
    parser.add_argument("--seats", required=True, type=int, help="Total number of seats.")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible shuffle.")
    parser.add_argument("--sort", choices=("name", "seat"), default="name",
                        help="Order of the printed assignments.")
    parser.add_argument("--chart", action="store_true",
                        help="Print seat,name for every seat, empty seats included.")
    parser.add_argument("--out-assignments", type=Path,
                        help="Write assignments CSV: name,seat.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
                        help="Logging verbosity.")
    parser.add_argument("--log-dir", type=Path, help="Also write a timestamped log file here.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``python -m seat_randomizer.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_dir, level=getattr(logging, args.log_level))

    try:
        roster, reservations = load_all(args.names, args.reservations)
        result = assign_seats(roster, reservations, args.seats, seed=args.seed)
    except (OSError, ValueError) as exc:
        # SeatingError is a ValueError
        logger.debug("Seat assignment failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    rows = to_dataframe(result, by=args.sort)
    if args.chart:
        for seat, name in seat_chart(result):
            print(f"{seat},{name}")
    else:
        for name, seat in rows.itertuples(index=False):
            print(f"{name},{seat}")

    if args.out_assignments:
        args.out_assignments.parent.mkdir(parents=True, exist_ok=True)
        with args.out_assignments.open("w", newline="") as f:
            w = csv.writer(f)
            w.writerow(["name", "seat"])
            for name, seat in rows.itertuples(index=False):
                w.writerow([name, seat])
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
