"""Print the daily report for the seed stock.

    python -m gilded_rose.texttest_fixture [days]
"""

from __future__ import annotations

import argparse
import logging
import sys

from gilded_rose.config import settings
from gilded_rose.core import __version__
from gilded_rose.core.item.inventory import InventoryUpdater
from gilded_rose.core.item.report import render_report
from gilded_rose.core.logging import setup_logging
from gilded_rose.services.inventory_service import InventoryService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gilded-rose",
        description="Gilded Rose - daily inventory report",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "days",
        nargs="?",
        type=int,
        default=settings.DEFAULT_REPORT_DAYS,
        help="Number of days to print, starting at day 0",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    if args.days < 0:
        parser.error("days must be non-negative")

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    setup_logging(logging.getLevelName(level))

    updater = InventoryUpdater(InventoryService().load_seed())

    print("OMGHAI!")
    print(render_report(updater, args.days), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
