from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from config.settings import get_settings
from models.parsed_profile import ParsedProfile
from models.profile_record import ProfileRecord
from utils.text_utils import sanitize_value


def map_to_profile_record(
    parsed: ParsedProfile,
    group_name: Optional[str] = None,
    group_profile_no: Optional[str] = None,
    global_profile_no: Optional[str] = None,
    added_by: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ProfileRecord:
    """Merge operator edits over parsed values and sanitize every field."""
    values: Dict[str, Any] = {name: getattr(parsed, name) for name in ParsedProfile.model_fields}
    for key, value in (overrides or {}).items():
        field = _field_name(key)
        if field in values:
            values[field] = value
    cleaned = {k: sanitize_value(v) for k, v in values.items()}
    return ProfileRecord(
        **cleaned,
        group_name=sanitize_value(group_name) or None,
        group_profile_no=sanitize_value(group_profile_no) or None,
        global_profile_no=sanitize_value(global_profile_no) or None,
        added_by=added_by or None,
    )


def _field_name(key: str) -> str:
    # Accept canonical keys (fatherOcc) as well as attribute names
    for name, info in ParsedProfile.model_fields.items():
        if key == name or key == info.alias:
            return name
    return key


def record_from_dict(row: Mapping[str, Any]) -> ProfileRecord:
    """Load a stored record; numbers (e.g. ``age: 28``) become strings."""
    values: Dict[str, Any] = {}
    for key, value in row.items():
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        values[_field_name(key)] = value
    for name in ParsedProfile.model_fields:
        if values.get(name) is None:
            values[name] = ""
    return ProfileRecord(**values)


def to_public_view(record: ProfileRecord) -> Dict[str, Any]:
    """Record as shown to anonymous visitors: contact details withheld."""
    view = record.model_dump(by_alias=True, exclude={"member_uid", "added_by"})
    view["contact"] = ""
    return view


def profile_share_url(record: ProfileRecord, base_url: Optional[str] = None) -> str:
    if not record.global_profile_no:
        raise ValueError("Profile is not published yet (no global profile number)")
    base = (base_url or get_settings().public_base_url).rstrip("/")
    return f"{base}/p/{record.global_profile_no}"
