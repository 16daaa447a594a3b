"""Tests for chunk partitioning."""

from datetime import datetime, timedelta, timezone

import pytest

from webex_summarizer.summarizer.chunker import partition
from webex_summarizer.summarizer.tokens import estimate_tokens
from webex_summarizer.webex.models import Message

START = datetime(2025, 5, 26, 9, 0, tzinfo=timezone.utc)


def _messages(*lengths):
    return [
        Message(
            id=f"m{i}",
            sender="jane.doe@example.com",
            text="x" * length,
            created_at=START + timedelta(minutes=i),
        )
        for i, length in enumerate(lengths)
    ]


def _flatten(chunks):
    return [m for chunk in chunks for m in chunk.messages]


def test_empty_input():
    assert partition([], 100) == []


def test_everything_fits_in_one_chunk():
    messages = _messages(*[20] * 10)  # 25 tokens each
    chunks = partition(messages, 1000)
    assert len(chunks) == 1
    assert chunks[0].tokens == 250
    assert len(chunks[0]) == 10


@pytest.mark.parametrize("budget", [30, 60, 100, 250, 1000])
def test_chunk_coverage(budget):
    messages = _messages(20, 400, 0, 80, 200, 4, 1000, 40)
    assert _flatten(partition(messages, budget)) == messages


@pytest.mark.parametrize("budget", [30, 60, 100, 250])
def test_chunk_bound(budget):
    messages = _messages(20, 400, 0, 80, 200, 4, 1000, 40)
    for chunk in partition(messages, budget):
        assert chunk.tokens == sum(estimate_tokens(m) for m in chunk.messages)
        assert chunk.tokens <= budget or len(chunk) == 1


def test_oversize_message_gets_singleton_chunk():
    messages = _messages(20, 4000, 20)  # 25, 1020, 25 tokens
    chunks = partition(messages, 100)
    assert [len(c) for c in chunks] == [1, 1, 1]
    assert chunks[1].messages == (messages[1],)
    assert chunks[1].tokens == 1020


def test_greedy_packing():
    messages = _messages(*[80] * 5)  # 40 tokens each
    assert [len(c) for c in partition(messages, 100)] == [2, 2, 1]


def test_chunk_count_is_monotonic():
    counts = [len(partition(_messages(*[100] * n), 200)) for n in range(1, 30)]
    assert counts == sorted(counts)


def test_custom_estimator():
    messages = _messages(1, 1, 1, 1)
    chunks = partition(messages, 2, estimate=lambda m: 1)
    assert [len(c) for c in chunks] == [2, 2]
