# tests/test_dates.py

from __future__ import annotations

from gedcom_chart.dates import parse_date


def test_simple_year():
    assert parse_date("1900") == {"date": {"year": 1900}}


def test_month_year():
    assert parse_date("JAN 1900") == {"date": {"month": 1, "year": 1900}}


def test_full_date_is_case_insensitive():
    assert parse_date("12 mar 1890") == {"date": {"day": 12, "month": 3, "year": 1890}}


def test_qualified_dates():
    assert parse_date("ABT 1900") == {"date": {"qualifier": "abt", "year": 1900}}
    assert parse_date("EST JUN 1850") == {"date": {"qualifier": "est", "month": 6, "year": 1850}}
    assert parse_date("CAL 1 JAN 1800")["date"]["qualifier"] == "cal"


def test_between_range():
    assert parse_date("BET 1 JAN 1800 AND 2 FEB 1810") == {
        "dateRange": {
            "from": {"day": 1, "month": 1, "year": 1800},
            "to": {"day": 2, "month": 2, "year": 1810},
        }
    }


def test_from_to_range():
    assert parse_date("FROM 1900 TO 1910") == {
        "dateRange": {"from": {"year": 1900}, "to": {"year": 1910}}
    }


def test_open_ranges():
    assert parse_date("BEF 1800") == {"dateRange": {"to": {"year": 1800}}}
    assert parse_date("AFT 1750") == {"dateRange": {"from": {"year": 1750}}}
    assert parse_date("FROM 1750") == {"dateRange": {"from": {"year": 1750}}}
    assert parse_date("TO 1760") == {"dateRange": {"to": {"year": 1760}}}


def test_calendar_markers_are_ignored():
    assert parse_date("1 JAN 1750 (Julian)") == {"date": {"day": 1, "month": 1, "year": 1750}}
    assert parse_date("@#DJULIAN@ 1 JAN 1750") == {"date": {"day": 1, "month": 1, "year": 1750}}


def test_dual_year_keeps_first_year():
    assert parse_date("10 FEB 1750/51") == {"date": {"day": 10, "month": 2, "year": 1750}}


def test_unparseable_text_is_preserved():
    assert parse_date("Unknown") == {"date": {"text": "Unknown"}}
    assert parse_date("BET 1900") == {"date": {"text": "BET 1900"}}
    assert parse_date("") == {"date": {"text": ""}}
