from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldRule:
    """Label synonyms for one profile field.

    Labels are regex fragments tried in order against each line; a line that
    contains any of the exclude keywords (case-insensitive) is skipped.
    """

    field: str
    labels: tuple[str, ...]
    excludes: tuple[str, ...] = ()


_PARENTS = ("Father", "Mother")


# Extraction order for labeled fields. Edit here to add synonyms.
# Keys match ParsedProfile attribute names.
FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "name",
        (
            "Name",
            r"FULL\s*NAME",
            "Candidate Name",
            "Boy Name",
            "Girl Name",
            "Bride Name",
            "Groom Name",
        ),
        _PARENTS,
    ),
    FieldRule("gender", ("Gender", "Sex")),
    # \b keeps "Weight:" from reading as a height label
    FieldRule("height", ("Height", r"\bHt")),
    FieldRule("complexion", ("Color", "Colour", "Complexion", "Skin Tone")),
    FieldRule("diet", ("Diet", "Food")),
    FieldRule("dob", ("Date of Birth", "DOB", r"D\.O\.B\.?")),
    FieldRule("tob", ("Birth Time", "Time of Birth", "TOB", "Time")),
    FieldRule("pob", ("Birth Place", "Place of Birth", "POB")),
    FieldRule("city", ("City", "Location", "Residing at", "Living in")),
    FieldRule("caste", ("Caste", "Sub Caste")),
    FieldRule("gotra", ("Gotra",)),
    FieldRule("education", ("Qualification", "Education", "Degree")),
    FieldRule(
        "profession",
        ("Profession", "Occupation", "Job", "Work", "Occuption", "Occuaption"),
        _PARENTS,
    ),
    FieldRule("company", ("Company", "Working at", "Working in", "Office")),
    FieldRule("income", ("Package", "Income", "Salary", "CTC", "LPA")),
    FieldRule(
        "address",
        ("Present Address", "Permanent Address", "Address", "Residence", "Residing"),
    ),
    FieldRule("contact", ("Mob", "Mobile", "Contact", "Phone", "WhatsApp")),
    FieldRule("age", (r"\bAge",)),
)
