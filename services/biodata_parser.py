"""Heuristic parser for WhatsApp-style matrimony biodata messages.

The parser never raises: any field it cannot find is left as an empty string.
Layers run in a fixed order:

1. line normalization
2. labeled ``Label: value`` extraction driven by ``config.field_rules``
3. a free-form scan for parent and sibling lines
4. whole-text fallbacks and derived fields (gender, manglik, height, income,
   contact, name cleanup, age, city)
"""
from __future__ import annotations

import logging
import re
import time
from datetime import date
from typing import Dict, Iterable, List, Optional

from config.field_rules import FIELD_RULES
from config.settings import get_settings
from models.parsed_profile import ParsedProfile
from utils.date_parsing import calculate_age


_GLUED_LABEL_RE = re.compile(r"([a-z])((?i:Name|DOB|Contact)\s*[:\-])")
_DELIMITER_RE = re.compile(r"\s*[:\-]+\s*")

_MALE_RE = re.compile(r"\b(boy|male|groom|he)\b", re.IGNORECASE)
_FEMALE_RE = re.compile(r"\b(girl|female|bride|she)\b", re.IGNORECASE)
_NON_MANGLIK_RE = re.compile(r"non[\s-]?manglik", re.IGNORECASE)
_ANSHIK_RE = re.compile(r"anshik", re.IGNORECASE)
_MANGLIK_RE = re.compile(r"manglik", re.IGNORECASE)
# 5'7"  5.7"  5 - 11”  5′7′
_HEIGHT_RE = re.compile(r"(\d)['’′.\s-]*(\d{1,2})['\"”′″]")
# A number starts only after a non-digit, so a long digit run scans linearly
_INCOME_RE = re.compile(r"(?<!\d)(?<!\d\.)\d+(?:\.\d+)?\s*(LPA|Lac|Lakhs|CTC)", re.IGNORECASE)
_PHONE_RE = re.compile(r"(\+91|0)?\s?(\d{5}\s?\d{5}|\d{10})")
_HONORIFIC_RE = re.compile(r"^(CA|Er|Dr|Mr|Ms|Mrs)\.?\s+", re.IGNORECASE)
_PARENTHETICAL_RE = re.compile(r"\(.*\)")

_FATHER_OCC_HINTS = ("occupation", "occ.", "job", "working", "business")
_MOTHER_OCC_HINTS = ("occupation", "occ.", "job", "housewife", "working")
_SIBLING_HINTS = ("sibling", "brother", "sister")


def _empty_profile() -> Dict[str, str]:
    return {name: "" for name in ParsedProfile.model_fields}


def _split_lines(text: str) -> List[str]:
    cleaned = _GLUED_LABEL_RE.sub(r"\1\n\2", text)
    return [ln.strip() for ln in cleaned.split("\n") if ln.strip()]


def get_value(lines: Iterable[str], labels: Iterable[str], excludes: Iterable[str] = ()) -> str:
    """Return the value of the first ``label: value`` line, or "".

    Lines are scanned top to bottom and labels in the order given; lines that
    mention an excluded keyword are skipped. The value stops at the first
    comma.
    """
    labels = list(labels)
    excluded = [k.lower() for k in excludes]
    for line in lines:
        lower = line.lower()
        if any(k in lower for k in excluded):
            continue
        for label in labels:
            # "*Name* :- value" is common in WhatsApp bold text
            m = re.search(rf"{label}[\s*]*[:\-]+\s*(.+)", line, flags=re.IGNORECASE)
            if m:
                value = re.split(r"[,\n]", m.group(1), maxsplit=1)[0].strip()
                if value:
                    return value
    return ""


def _after_delimiter(line: str) -> str:
    parts = _DELIMITER_RE.split(line, maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def _person_name(line: str, keyword: str) -> str:
    value = _after_delimiter(line)
    if value:
        return value
    return re.sub(keyword, "", line.replace("*", ""), count=1, flags=re.IGNORECASE).strip()


def _scan_family(lines: List[str], data: Dict[str, str]) -> None:
    siblings: List[str] = []
    for line in lines:
        lower = line.lower()
        for keyword, name_key, occ_key, occ_hints in (
            ("father", "father", "father_occ", _FATHER_OCC_HINTS),
            ("mother", "mother", "mother_occ", _MOTHER_OCC_HINTS),
        ):
            if keyword not in lower:
                continue
            is_name_line = "name" in lower or "occupation" not in lower
            if is_name_line and not data[name_key]:
                data[name_key] = _person_name(line, keyword)
            if any(h in lower for h in occ_hints):
                data[occ_key] = _after_delimiter(line) or data[occ_key]

        if any(h in lower for h in _SIBLING_HINTS):
            siblings.append(_after_delimiter(line) or line)

    if siblings:
        data["siblings"] = " ".join([data["siblings"], *siblings]).strip()


def _normalize_height(value: str) -> str:
    m = _HEIGHT_RE.search(value)
    if m and m.group(1) in get_settings().plausible_height_feet:
        return f"{m.group(1)}'{m.group(2)}"
    return ""


def _infer_gender(text: str) -> str:
    if _MALE_RE.search(text):
        return "Male"
    if _FEMALE_RE.search(text):
        return "Female"
    return ""


def _detect_manglik(text: str) -> str:
    # "manglik" is a substring of "non-manglik"; order matters
    if _NON_MANGLIK_RE.search(text):
        return "Non-Manglik"
    if _ANSHIK_RE.search(text):
        return "Anshik"
    if _MANGLIK_RE.search(text):
        return "Manglik"
    return ""


def _clean_name(name: str) -> str:
    name = _HONORIFIC_RE.sub("", name)
    return _PARENTHETICAL_RE.sub("", name).strip()


def _apply_fallbacks(text: str, lines: List[str], data: Dict[str, str], today: Optional[date]) -> None:
    if not data["gender"]:
        data["gender"] = _infer_gender(text)

    data["manglik"] = _detect_manglik(text)

    if data["height"]:
        data["height"] = _normalize_height(data["height"]) or data["height"]
    else:
        data["height"] = _normalize_height(text)

    if not data["income"]:
        m = _INCOME_RE.search(text)
        if m:
            data["income"] = m.group(0)

    if not data["contact"]:
        m = _PHONE_RE.search(text)
        if m:
            data["contact"] = m.group(0).strip()

    if data["name"]:
        data["name"] = _clean_name(data["name"])
    elif lines and len(lines[0]) < get_settings().name_fallback_max_length:
        header = lines[0].replace("*", "")
        data["name"] = re.sub("biodata", "", header, count=1, flags=re.IGNORECASE).strip()

    if data["dob"]:
        age = calculate_age(data["dob"], today)
        if age:
            data["age"] = age

    if not data["city"]:
        data["city"] = data["pob"] or data["address"].split(",")[0].strip()


def parse_biodata(text: str, today: Optional[date] = None) -> ParsedProfile:
    """Parse one free-text biodata message into a ParsedProfile.

    ``today`` pins the reference date for the age derived from ``dob``.
    """
    started = time.perf_counter()
    text = text or ""
    data = _empty_profile()
    lines = _split_lines(text)

    for rule in FIELD_RULES:
        data[rule.field] = get_value(lines, rule.labels, rule.excludes)

    _scan_family(lines, data)
    _apply_fallbacks(text, lines, data, today)

    profile = ParsedProfile(**data)
    logging.debug(
        f"Parsed biodata: {sum(1 for v in data.values() if v)} fields filled",
        extra={
            "step": "parse_biodata",
            "status": "ok",
            "duration_ms": int((time.perf_counter() - started) * 1000),
        },
    )
    return profile
