"""Print the live road/bridge status (or the user directory) to the terminal.

Usage examples:
    sadak-sathi-status --status blocked
    sadak-sathi-status --search prithvi --sheet-id <spreadsheet id>
    sadak-sathi-status --users
"""

from __future__ import annotations

import argparse
import logging
import sys

from sadak_sathi.config import parse_args as parse_base
from sadak_sathi.helpers.status import (
    STATUS_FILTERS,
    filter_records,
    records_frame,
    users_frame,
)
from sadak_sathi.sheets.client import SheetClient

logger = logging.getLogger(__name__)


def parse_cli(argv=None):
    """Parse command-line arguments."""
    base = parse_base(argv)
    parser = argparse.ArgumentParser(
        add_help=True, description="Show live road and bridge conditions."
    )
    parser.add_argument("--sheet-id", dest="sheet_id", help="Spreadsheet id override")
    parser.add_argument("--timeout", type=float, help="Seconds to wait for each CSV export")
    parser.add_argument(
        "--status", choices=STATUS_FILTERS, default="all", help="Only show this status"
    )
    parser.add_argument("--search", default="", help="Case-insensitive name search")
    parser.add_argument(
        "--users", action="store_true", help="List the user directory instead"
    )
    return parser.parse_args(argv, namespace=base)


def main(argv=None) -> int:
    """Run the status report from the command line."""
    logging.basicConfig(level=logging.INFO)
    args = parse_cli(argv)
    client = SheetClient(spreadsheet_id=args.sheet_id, timeout=args.timeout)

    if args.users:
        result = client.get_admin_and_user_data()
    else:
        result = client.get_road_and_bridge_data()

    if not result["success"]:
        logger.error(result["error"])
        return 1

    if args.users:
        frame = users_frame(result["data"])
    else:
        frame = records_frame(filter_records(result["data"], args.status, args.search))

    if frame.empty:
        print("No matching entries.")
    else:
        print(frame.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
