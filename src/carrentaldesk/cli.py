"""Command-line entry point for the rental desk.

Run from the repository root with:
  PYTHONPATH=src python -m carrentaldesk

Options:
  --log-level   logging level for diagnostics on stderr (default WARNING).
  --debug       shorthand for DEBUG logging.
  --no-banner   skip the welcome and goodbye lines.
  --traceback   print the full traceback when a fatal error ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from collections.abc import Sequence

from .shell import DeskShell

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="car-rental-desk",
        description="Interactive car rental desk simulator.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level for diagnostics written to stderr.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the welcome and goodbye lines.",
    )
    parser.add_argument(
        "--traceback",
        action="store_true",
        help="Print full tracebacks on fatal errors.",
    )
    return parser.parse_args(argv)


def _print_exception(label: str, exc: BaseException, *, trace: bool) -> None:
    print(f"{label}: {exc.__class__.__name__}: {exc}", file=sys.stderr)
    if trace:
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)


def main(argv: Sequence[str] | None = None, *, shell: DeskShell | None = None) -> int:
    args = _parse_args(argv)
    log_level = "DEBUG" if args.debug else args.log_level
    logging.basicConfig(level=log_level, stream=sys.stderr)
    _LOGGER.debug("Starting rental desk (log level %s)", log_level)

    if shell is None:
        shell = DeskShell(show_banner=not args.no_banner)
    try:
        return shell.run()
    except KeyboardInterrupt as exc:
        _print_exception("Interrupted", exc, trace=False)
        return 1
    except Exception as exc:
        _LOGGER.debug("Session ended by an unexpected error", exc_info=True)
        _print_exception("Fatal error", exc, trace=args.traceback)
        return 1
