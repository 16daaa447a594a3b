"""Tests for keyword and date search."""

from datetime import datetime, timezone

import pytest

from webex_summarizer.search.messages import filter_by_date, message_context, search_messages
from webex_summarizer.webex.models import Message


def _at(day, hour=12):
    return datetime(2025, 5, day, hour, 0, tzinfo=timezone.utc)


@pytest.fixture
def messages():
    return [
        Message(id="m1", sender="a@example.com", text="Kickoff for the Budget review", created_at=_at(24)),
        Message(id="m2", sender="b@example.com", text=None, created_at=_at(25)),
        Message(id="m3", sender="a@example.com", text="budget approved", created_at=_at(26)),
        Message(id="m4", sender="c@example.com", text="lunch?", created_at=_at(27)),
        Message(id="m5", sender="b@example.com", text="BUDGET slides attached", created_at=_at(28)),
    ]


def test_search_is_case_insensitive(messages):
    assert [m.id for m in search_messages(messages, "budget")] == ["m1", "m3", "m5"]


def test_search_skips_messages_without_text(messages):
    assert search_messages(messages, "none") == []


def test_search_with_inclusive_date_bounds(messages):
    found = search_messages(messages, "budget", start=_at(26), end=_at(28))
    assert [m.id for m in found] == ["m3", "m5"]


def test_filter_by_date_open_bounds(messages):
    assert [m.id for m in filter_by_date(messages, start=_at(27))] == ["m4", "m5"]
    assert [m.id for m in filter_by_date(messages, end=_at(25))] == ["m1", "m2"]
    assert filter_by_date(messages) == messages


def test_message_context_window(messages):
    context = message_context(messages, messages[2], size=1)
    assert [m.id for m in context] == ["m2", "m3", "m4"]


def test_message_context_clipped_at_edges(messages):
    assert [m.id for m in message_context(messages, messages[0], size=2)] == ["m1", "m2", "m3"]
    assert [m.id for m in message_context(messages, messages[4], size=2)] == ["m3", "m4", "m5"]


def test_message_context_unknown_message(messages):
    stranger = Message(id="x", sender="z@example.com", text="?", created_at=_at(1))
    assert message_context(messages, stranger) == [stranger]
