# tradedesk/services/csv_parser.py
"""
Minimal comma-separated text reader for trade and price uploads.

Quoting and escaping are NOT supported: every comma splits a field, so a
value containing a comma cannot be uploaded. Rows shorter than the header
leave the missing trailing columns as ``None``; extra values are dropped.
"""
from typing import Dict, List, Optional


def parse_csv(csv_text: str) -> List[Dict[str, Optional[str]]]:
    lines = csv_text.strip().split("\n")
    if len(lines) < 2:
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    rows = []

    for line in lines[1:]:
        values = [v.strip() for v in line.split(",")]
        row = {}
        for index, header in enumerate(headers):
            row[header] = values[index] if index < len(values) else None
        rows.append(row)

    return rows
