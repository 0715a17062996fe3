"""CSV export parsing.

The spreadsheet export is consumed with a deliberately simple splitter: lines on
``\\n``, cells on ``,``, quotes stripped. Quoted commas are not supported.
"""

from __future__ import annotations

from typing import Dict, List, Optional


def _cells(line: str) -> List[str]:
    return [cell.strip().replace('"', "") for cell in line.split(",")]


def csv_to_records(csv_text: Optional[str]) -> List[Dict[str, str]]:
    """Parse CSV text into header-keyed records.

    Blank lines are dropped. Rows with fewer cells than the header are skipped;
    surplus cells are ignored. A header with no data rows yields ``[]``.
    """
    if not csv_text:
        return []

    lines = [line for line in csv_text.split("\n") if line.strip() != ""]
    if len(lines) < 2:
        return []

    headers = _cells(lines[0])
    records: List[Dict[str, str]] = []
    for line in lines[1:]:
        cells = _cells(line)
        if len(cells) < len(headers):
            continue
        records.append({header: cells[idx] for idx, header in enumerate(headers)})

    return records
