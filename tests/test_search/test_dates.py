"""Tests for date parsing."""

from datetime import date, datetime, timedelta, timezone

import pytest

from webex_summarizer.search.dates import day_bounds, extract_date_from_question, parse_date_bound

TODAY = date(2025, 6, 10)


def test_parse_date_bound_start_and_end():
    start = parse_date_bound("2025-05-28", zone=timezone.utc)
    end = parse_date_bound("2025-5-28", end=True, zone=timezone.utc)
    assert start == datetime(2025, 5, 28, tzinfo=timezone.utc)
    assert end == datetime(2025, 5, 28, 23, 59, 59, 999999, tzinfo=timezone.utc)


def test_parse_date_bound_defaults_to_local_time():
    assert parse_date_bound("2025-05-28").tzinfo is not None


@pytest.mark.parametrize("value", ["28/05/2025", "2025-13-01", "yesterday", ""])
def test_parse_date_bound_invalid(value):
    with pytest.raises(ValueError):
        parse_date_bound(value)


def test_day_bounds():
    start, end = day_bounds(date(2025, 5, 26), timezone.utc)
    assert start == datetime(2025, 5, 26, tzinfo=timezone.utc)
    assert end - start == timedelta(days=1) - timedelta(microseconds=1)


@pytest.mark.parametrize("question, expected", [
    ("What was discussed on May 26th?", date(2025, 5, 26)),
    ("what happened on sept 3", date(2025, 9, 3)),
    ("Decisions from 26 May?", date(2025, 5, 26)),
    ("Anything on the 4th of July?", date(2025, 7, 4)),
    ("What about 26/05?", date(2025, 5, 26)),
    ("What about 05/26?", date(2025, 5, 26)),
    ("What about 03/04?", date(2025, 3, 4)),
    ("Who spoke on the 2nd?", date(2025, 6, 2)),
])
def test_extract_date_from_question(question, expected):
    assert extract_date_from_question(question, today=TODAY) == expected


@pytest.mark.parametrize("question", [
    "What did we decide about the budget?",
    "What happened on February 30th?",
    "",
])
def test_extract_date_from_question_none(question):
    assert extract_date_from_question(question, today=TODAY) is None
