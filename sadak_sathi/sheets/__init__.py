from .csv_records import csv_to_records  # noqa: F401
from .client import SheetClient, SheetFetchError, export_url  # noqa: F401

__all__ = [
    "csv_to_records",
    "export_url",
    "SheetClient",
    "SheetFetchError",
]
