from __future__ import annotations

import pytest

from models.profile_record import ProfileRecord
from services.biodata_parser import parse_biodata
from services.mapping import map_to_profile_record
from services.profile_filter import ProfileFilter, filter_profiles


@pytest.fixture
def records():
    return [
        ProfileRecord(name="Priya Verma", gender="Female", age="25", city="Jaipur", caste="Agarwal",
                      profession="Engineer", manglik="Non-Manglik", global_profile_no="HS-00001"),
        ProfileRecord(name="Rohit Sharma", gender="Male", age="30", pob="Pune", gotra="Bharadwaj",
                      profession="Doctor", manglik="Manglik", group_profile_no="7"),
        ProfileRecord(name="Kiran Rao", gender="Female", age="", city="Indore", manglik="Yes"),
        ProfileRecord(name="Amit Jain", gender="Male", age="thirty", city="Kota", manglik=""),
    ]


def _names(found):
    return [r.name for r in found]


def test_no_filters_keeps_everything(records):
    assert len(filter_profiles(records, ProfileFilter())) == 4


def test_search_term_matches_several_fields(records):
    assert _names(filter_profiles(records, ProfileFilter(search="doctor"))) == ["Rohit Sharma"]
    assert _names(filter_profiles(records, ProfileFilter(search="hs-0000"))) == ["Priya Verma"]
    assert _names(filter_profiles(records, ProfileFilter(search=" indore "))) == ["Kiran Rao"]


def test_gender(records):
    assert _names(filter_profiles(records, ProfileFilter(gender="Male"))) == ["Rohit Sharma", "Amit Jain"]


def test_age_range_excludes_unknown_ages(records):
    assert _names(filter_profiles(records, ProfileFilter(min_age=26))) == ["Rohit Sharma"]
    assert _names(filter_profiles(records, ProfileFilter(max_age=25))) == ["Priya Verma"]
    assert _names(filter_profiles(records, ProfileFilter(min_age=20, max_age=40))) == ["Priya Verma", "Rohit Sharma"]


def test_city_falls_back_to_place_of_birth(records):
    assert _names(filter_profiles(records, ProfileFilter(city="pune"))) == ["Rohit Sharma"]


def test_caste_falls_back_to_gotra(records):
    assert _names(filter_profiles(records, ProfileFilter(caste="bhara"))) == ["Rohit Sharma"]
    assert _names(filter_profiles(records, ProfileFilter(caste="agar"))) == ["Priya Verma"]


def test_manglik(records):
    assert _names(filter_profiles(records, ProfileFilter(manglik="Yes"))) == ["Rohit Sharma", "Kiran Rao"]
    assert _names(filter_profiles(records, ProfileFilter(manglik="No"))) == ["Priya Verma"]


def test_age_range_reads_leading_integer_of_labeled_age():
    rec = map_to_profile_record(parse_biodata("Name: Rahul\nAge: 27 yrs"))
    assert rec.age == "27 yrs"
    assert filter_profiles([rec], ProfileFilter(min_age=25, max_age=30)) == [rec]
    assert filter_profiles([rec], ProfileFilter(min_age=28)) == []
