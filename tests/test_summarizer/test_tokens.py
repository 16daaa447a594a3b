"""Tests for token estimation."""

from datetime import datetime, timezone

from webex_summarizer.summarizer.tokens import estimate_tokens
from webex_summarizer.webex.models import Message


def _message(text):
    return Message(id="m", sender="a@example.com", text=text,
                   created_at=datetime(2025, 5, 26, tzinfo=timezone.utc))


def test_estimate_rounds_up_and_adds_overhead():
    assert estimate_tokens("abcd") == 1 + 20
    assert estimate_tokens("abcde") == 2 + 20


def test_estimate_empty_text_is_overhead_only():
    assert estimate_tokens(None) == 20
    assert estimate_tokens("") == 20
    assert estimate_tokens(_message(None)) == 20


def test_estimate_uses_message_text():
    assert estimate_tokens(_message("x" * 400)) == 120


def test_estimate_custom_ratio_and_overhead():
    assert estimate_tokens("x" * 10, chars_per_token=2, overhead=0) == 5


def test_estimate_is_monotonic():
    estimates = [estimate_tokens("x" * n) for n in range(0, 200)]
    assert estimates == sorted(estimates)
