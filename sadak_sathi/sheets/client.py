"""Live spreadsheet access over the public CSV export endpoint.

Each tab of the spreadsheet is fetched as CSV, parsed with
:func:`csv_to_records` and tagged so rows from different tabs can share one
table:

- get_road_and_bridge_data() - road and bridge status rows
- get_admin_and_user_data()  - super admin, admin and user directory rows

Both return ``{"success": True, "data": [...]}`` or
``{"success": False, "error": "..."}`` so the UI can render either branch.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from sadak_sathi.config.settings import SETTINGS
from sadak_sathi.sheets.csv_records import csv_to_records

logger = logging.getLogger(__name__)

EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"

ROAD_DATA_ERROR = (
    "Could not load road/bridge data. Please check the connection and sheet permissions."
)
USER_DATA_ERROR = (
    "Could not load user data. Please verify the GIDs in the code and check sheet permissions."
)


class SheetFetchError(Exception):
    """Raised when a spreadsheet tab cannot be downloaded."""


def export_url(spreadsheet_id: str, gid: str) -> str:
    """Return the CSV export URL for one tab of a spreadsheet."""
    return EXPORT_URL.format(sheet_id=spreadsheet_id, gid=gid)


def _row_key(row: Dict[str, Any], index: int) -> str:
    return row.get("id") or str(index)


def tag_rows(
    rows: List[Dict[str, Any]], prefix: str, **fields: Any
) -> List[Dict[str, Any]]:
    """Copy *rows* adding ``unique_id`` and the given constant *fields*."""
    return [
        {**row, **fields, "unique_id": f"{prefix}-{_row_key(row, index)}"}
        for index, row in enumerate(rows)
    ]


class SheetClient:
    """Client for the road/bridge spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: str | None = None,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
        settings=None,
    ):
        self.settings = settings or SETTINGS
        self.spreadsheet_id = spreadsheet_id or self.settings.spreadsheet_id
        self.timeout = timeout or self.settings.fetch_timeout_sec
        self._http = session or requests

    def fetch_sheet(self, gid: str) -> str:
        """Download one tab as CSV text."""
        url = export_url(self.spreadsheet_id, gid)
        try:
            response = self._http.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SheetFetchError(f"Failed to fetch sheet with GID: {gid}") from exc

        if not response.ok:
            logger.warning("CSV export for GID %s returned %s", gid, response.status_code)
            raise SheetFetchError(f"Failed to fetch sheet with GID: {gid}")
        return response.text

    def get_road_and_bridge_data(self) -> Dict[str, Any]:
        """Return road rows followed by bridge rows, normalised for display."""
        try:
            road_csv = self.fetch_sheet(self.settings.road_sheet_gid)
            bridge_csv = self.fetch_sheet(self.settings.bridge_sheet_gid)
        except SheetFetchError as exc:
            logger.error("Error fetching road/bridge data: %s", exc)
            return {"success": False, "error": ROAD_DATA_ERROR}

        roads = [
            {**row, "type": "Road", "name": row.get("HighwayName"), "location": row.get("Section")}
            for row in csv_to_records(road_csv)
        ]
        bridges = [
            {**row, "type": "Bridge", "name": row.get("BridgeName"), "location": row.get("Location")}
            for row in csv_to_records(bridge_csv)
        ]
        data = tag_rows(roads, "road") + tag_rows(bridges, "bridge")
        logger.info("Loaded %d roads and %d bridges", len(roads), len(bridges))
        return {"success": True, "data": data}

    def get_admin_and_user_data(self) -> Dict[str, Any]:
        """Return the user directory. Password columns are carried but never used."""
        try:
            superadmin_csv = self.fetch_sheet(self.settings.superadmin_sheet_gid)
            admin_csv = self.fetch_sheet(self.settings.admin_sheet_gid)
            user_csv = self.fetch_sheet(self.settings.user_sheet_gid)
        except SheetFetchError as exc:
            logger.error("Error fetching admin/user data: %s", exc)
            return {"success": False, "error": USER_DATA_ERROR}

        data = (
            tag_rows(csv_to_records(superadmin_csv), "superadmin", role="Super Admin")
            + tag_rows(csv_to_records(admin_csv), "admin", role="Admin")
            + tag_rows(csv_to_records(user_csv), "user", role="User")
        )
        logger.info("Loaded %d user directory rows", len(data))
        return {"success": True, "data": data}
