from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from models.profile_record import ProfileRecord


@dataclass
class ProfileFilter:
    search: str = ""
    gender: str = "All"
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    city: str = ""
    caste: str = ""
    manglik: str = "All"  # All | Yes | No


_LEADING_INT_RE = re.compile(r"\s*(\d+)")


def _leading_int(value: Optional[str]) -> Optional[int]:
    """Leading integer of a free-text value: "27 yrs" reads as 27."""
    m = _LEADING_INT_RE.match(value or "")
    return int(m.group(1)) if m else None


def _matches_search(p: ProfileRecord, term: str) -> bool:
    if not term:
        return True
    haystack = (p.name, p.profession, p.city, p.global_profile_no, p.group_profile_no)
    return any(term in (v or "").lower() for v in haystack)


def _matches_age(p: ProfileRecord, flt: ProfileFilter) -> bool:
    if flt.min_age is None and flt.max_age is None:
        return True
    age = _leading_int(p.age)
    if age is None:
        return False
    if flt.min_age is not None and age < flt.min_age:
        return False
    if flt.max_age is not None and age > flt.max_age:
        return False
    return True


def _matches_manglik(p: ProfileRecord, wanted: str) -> bool:
    value = (p.manglik or "").lower()
    if wanted == "Yes":
        return value.startswith("y") or value in ("manglik", "anshik")
    if wanted == "No":
        return value.startswith("n")
    return True


def matches(p: ProfileRecord, flt: ProfileFilter) -> bool:
    city_source = (p.city or p.pob or "").lower()
    caste_source = (p.caste or p.gotra or "").lower()
    return (
        _matches_search(p, flt.search.lower().strip())
        and (flt.gender == "All" or p.gender == flt.gender)
        and _matches_age(p, flt)
        and (not flt.city or flt.city.lower() in city_source)
        and (not flt.caste or flt.caste.lower() in caste_source)
        and _matches_manglik(p, flt.manglik)
    )


def filter_profiles(records: Iterable[ProfileRecord], flt: ProfileFilter) -> List[ProfileRecord]:
    """Directory search: keep the records that pass every active filter."""
    return [p for p in records if matches(p, flt)]
