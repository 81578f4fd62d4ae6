# smartres_api/common/dates.py
from __future__ import annotations

from datetime import datetime, date

_DATE_FORMATS = ("%Y-%m-%d", "%d-%m-%Y", "%Y/%m/%d", "%m/%d/%Y")


def parse_date(val) -> date | None:
    """
    Accepts date/datetime objects (openpyxl cells) and strings:
      - 'YYYY-MM-DD'  (canonical)
      - ISO timestamps ('2024-03-01T00:00:00.000Z')
      - 'DD-MM-YYYY', 'YYYY/MM/DD', 'MM/DD/YYYY'
    Returns None when nothing matches.
    """
    if val is None:
        return None
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    s = str(val).strip()
    if not s:
        return None
    if "T" in s:
        try:
            return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            pass
    return None


def iso(val) -> str | None:
    return val.isoformat() if val else None
