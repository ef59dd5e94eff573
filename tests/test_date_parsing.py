from __future__ import annotations

from datetime import date

import pytest

from utils.date_parsing import calculate_age


def test_completed_years_before_birthday(today):
    # 15 Aug 1995 -> 1 Jan 2024: birthday not reached yet in 2024
    assert calculate_age("15/08/1995", today) == "28"


def test_completed_years_on_birthday():
    assert calculate_age("15/08/1995", date(2024, 8, 15)) == "29"


@pytest.mark.parametrize("dob", ["15-08-1995", "15.08.1995", "15th Aug 1995", "'15/08/1995'", "15 August 1995"])
def test_separator_ordinal_and_quote_variants(dob, today):
    assert calculate_age(dob, today) == "28"


def test_direct_parse_is_month_first_when_ambiguous():
    # 12/03/1998 reads as 3 Dec 1998; day-first only applies when the direct parse fails
    assert calculate_age("12/03/1998", date(1999, 6, 1)) == "0"
    assert calculate_age("12/03/1998", date(1999, 12, 3)) == "1"


def test_iso_dates():
    assert calculate_age("1990-05-20", date(2024, 5, 19)) == "33"


@pytest.mark.parametrize("dob", ["", None, "unknown", "31/02/1995", "//"])
def test_unreadable_dates_give_empty(dob):
    assert calculate_age(dob, date(2024, 1, 1)) == ""
