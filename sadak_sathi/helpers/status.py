"""Status filtering and search over road/bridge records."""
from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

STATUS_FILTERS = ("all", "blocked", "one-lane", "resumed")

STATUS_LABELS = {
    "blocked": "Blocked",
    "one-lane": "One-lane",
    "resumed": "Resumed",
    "all": "All",
}

# Display column -> record key
TABLE_COLUMNS = {
    "Type": "type",
    "Name": "name",
    "Section / Location": "location",
    "Status": "Status",
    "Cause": "Cause",
    "Contact": "Contact",
}


def _status_of(record: Dict[str, Any]) -> str:
    return (record.get("Status") or "").lower()


def filter_records(
    records: List[Dict[str, Any]],
    status_filter: str = "all",
    search_term: str = "",
) -> List[Dict[str, Any]]:
    """Return records matching *status_filter* whose name contains *search_term*.

    Status comparison is case-insensitive and exact; records without a status
    only survive the ``all`` filter. The search is a case-insensitive substring
    match on ``name``.
    """
    needle = (search_term or "").lower()
    result = []
    for record in records:
        if status_filter != "all" and _status_of(record) != status_filter:
            continue
        if needle and needle not in (record.get("name") or "").lower():
            continue
        result.append(record)
    return result


def status_counts(records: List[Dict[str, Any]]) -> Dict[str, int]:
    """Count records per status filter."""
    counts = {key: 0 for key in STATUS_FILTERS}
    counts["all"] = len(records)
    for record in records:
        status = _status_of(record)
        if status in counts and status != "all":
            counts[status] += 1
    return counts


def records_frame(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Tabulate records with the dashboard's display columns."""
    rows = [
        {column: record.get(key) or "" for column, key in TABLE_COLUMNS.items()}
        for record in records
    ]
    return pd.DataFrame(rows, columns=list(TABLE_COLUMNS))


def users_frame(users: List[Dict[str, Any]]) -> pd.DataFrame:
    """Tabulate user directory rows; a missing status reads as Active."""
    rows = [
        {
            "Email": user.get("email") or "",
            "Role": user.get("role") or "",
            "Status": user.get("status") or "Active",
        }
        for user in users
    ]
    return pd.DataFrame(rows, columns=["Email", "Role", "Status"])
