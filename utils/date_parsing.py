from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateparser


_ORDINAL_RE = re.compile(r"(\d+)(st|nd|rd|th)", re.IGNORECASE)
# Fills the parts a bare "1995" or "Aug 1995" leaves out
_PARSE_DEFAULT = datetime(2000, 1, 1)


def _normalize_date_text(value: str) -> str:
    s = _ORDINAL_RE.sub(r"\1", value, count=1)
    s = re.sub(r"['\"]", "", s)
    return re.sub(r"[-.]", "/", s).strip()


def _parse_birth_date(value: str) -> Optional[date]:
    """Month-first parse, then a day/month/year reading of a slash date.

    Returns None for unparsable inputs.
    """
    s = _normalize_date_text(value)
    if not s:
        return None
    try:
        return dateparser.parse(s, dayfirst=False, default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError):
        pass
    parts = s.split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def calculate_age(dob: Optional[str], today: Optional[date] = None) -> str:
    """Completed years between a free-text birth date and ``today``.

    Returns "" when the date cannot be read.
    """
    if not dob:
        return ""
    birth = _parse_birth_date(dob)
    if birth is None:
        return ""
    today = today or date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return str(age)
