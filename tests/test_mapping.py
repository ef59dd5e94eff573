from __future__ import annotations

import pytest

from models.profile_record import ProfileRecord
from services.biodata_parser import parse_biodata
from services.mapping import (
    map_to_profile_record,
    profile_share_url,
    record_from_dict,
    to_public_view,
)
from utils.text_utils import sanitize_value


def test_sanitize_strips_markup_and_caps_length():
    assert sanitize_value("  <b>Priya</b> ") == "Priya"
    assert sanitize_value(None) == ""
    assert sanitize_value("x" * 600) == "x" * 500
    assert sanitize_value("abcdef", max_length=3) == "abc"


def test_max_field_length_from_env(monkeypatch):
    from config.settings import get_settings
    monkeypatch.setenv("MAX_FIELD_LENGTH", "4")
    get_settings.cache_clear()
    try:
        assert sanitize_value("abcdefgh") == "abcd"
    finally:
        get_settings.cache_clear()


def test_overrides_win_over_parsed_values(sample_biodata):
    parsed = parse_biodata(sample_biodata)
    record = map_to_profile_record(
        parsed,
        group_name="Jaipur Rishtey",
        group_profile_no="12",
        global_profile_no="HS-00023",
        added_by="admin@example.com",
        overrides={"profession": "Senior <i>Engineer</i>", "fatherOcc": "Retired", "unknown": "x"},
    )
    assert record.profession == "Senior Engineer"
    assert record.father_occ == "Retired"
    assert record.name == "Priya Verma"
    assert record.group_name == "Jaipur Rishtey"
    assert record.global_profile_no == "HS-00023"
    assert record.member_uid is None


def test_public_view_withholds_contact(sample_biodata):
    record = map_to_profile_record(parse_biodata(sample_biodata), group_name="G1")
    view = to_public_view(record)
    assert view["contact"] == ""
    assert view["name"] == "Priya Verma"
    assert view["groupName"] == "G1"
    assert view["fatherOcc"] == "Business"
    assert "addedBy" not in view
    assert record.contact == "9876543210"


def test_share_url_requires_global_number():
    with pytest.raises(ValueError):
        profile_share_url(ProfileRecord(name="A"))
    record = ProfileRecord(name="A", global_profile_no="HS-00023")
    assert profile_share_url(record, base_url="https://example.org/") == "https://example.org/p/HS-00023"


def test_share_url_uses_settings_base(monkeypatch):
    from config.settings import get_settings
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://matches.example/")
    get_settings.cache_clear()
    try:
        record = ProfileRecord(name="A", globalProfileNo="HS-1")
        assert profile_share_url(record) == "https://matches.example/p/HS-1"
    finally:
        get_settings.cache_clear()


def test_record_from_stored_dict():
    record = record_from_dict({
        "name": "Anita",
        "age": 27,
        "fatherOcc": "Teacher",
        "groupName": "G2",
        "createdAt": "2024-01-01",
        "mother": None,
    })
    assert record.age == "27"
    assert record.father_occ == "Teacher"
    assert record.group_name == "G2"
    assert record.mother == ""
    assert record.city == ""
