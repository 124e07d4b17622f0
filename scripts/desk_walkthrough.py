"""Manual walkthrough of a rental desk session.

Run from the repository root with:
  PYTHONPATH=src python scripts/desk_walkthrough.py

Feeds a scripted operator session into a DeskShell and prints the transcript,
then checks the resulting bills. Use --quiet to print only the summary and
--debug to see desk logging on stderr.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys

from carrentaldesk import Console, DeskShell, RentalDesk
from carrentaldesk.util import format_money

_LOGGER = logging.getLogger(__name__)

# One answer per prompt, in the order the shell asks for them.
_SESSION = [
    "2", "U1", "Alice",
    "2", "U1",
    "1", "C1", "Civic", "1",
    "1", "L1", "S-Class", "2",
    "3", "C1", "U1", "10",
    "3", "L1", "U1", "1",
    "4", "R1", "15",
    "4", "L1", "4",
    "5",
    "7",
    "8",
]
_EXPECTED_BILLS = {"R1": 250.0, "R2": 450.0}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--quiet", action="store_true", help="Only print the summary.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level="DEBUG" if args.debug else "WARNING")
    stdin = io.StringIO("\n".join(_SESSION) + "\n")
    stdout = io.StringIO()
    desk = RentalDesk()
    shell = DeskShell(desk, console=Console(stdin=stdin, stdout=stdout))
    try:
        status = shell.run()
    except Exception as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(stdout.getvalue())
    print(f"Exit status: {status}")
    print(
        f"Cars: {len(desk.cars)} | Customers: {len(desk.customers)} | "
        f"Rentals: {len(desk.rentals)}"
    )
    failed = False
    for rental in desk.rentals:
        expected = _EXPECTED_BILLS.get(rental.id)
        marker = "ok" if expected == rental.total_bill else "MISMATCH"
        print(f"- {rental.id} | {rental.car_id} | {format_money(rental.total_bill)} | {marker}")
        if marker != "ok":
            failed = True
    if failed:
        _LOGGER.error("Walkthrough bills did not match the expected values.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
