import argparse
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv  # type: ignore

# Load .env if present
load_dotenv()


@dataclass
class CliSettings:
    sheet_id: Optional[str]
    timeout: float


def parse_args(argv: Optional[List[str]] = None) -> CliSettings:
    # Help is left to the calling script, which lists every flag
    parser = argparse.ArgumentParser(
        description="Sadak Sathi spreadsheet configuration", add_help=False
    )
    parser.add_argument(
        "--sheet-id",
        dest="sheet_id",
        help="Spreadsheet id holding the road, bridge and user tabs",
        default=os.getenv("SADAK_SHEET_ID"),
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        help="Seconds to wait for each CSV export",
        default=float(os.getenv("SHEET_FETCH_TIMEOUT", "15")),
    )

    # Use parse_known_args so that scripts can define additional CLI flags
    # (e.g., --status) without this parser failing due to unknown args.
    args = parser.parse_known_args(argv)[0]

    if args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds.")

    return CliSettings(sheet_id=args.sheet_id, timeout=args.timeout)
