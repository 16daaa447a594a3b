"""Keyword and date-range search over a conversation's messages."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from webex_summarizer.webex.models import Message

logger = logging.getLogger(__name__)


def _in_range(message: Message, start: datetime | None, end: datetime | None) -> bool:
    if start is not None and message.created_at < start:
        return False
    if end is not None and message.created_at > end:
        return False
    return True


def filter_by_date(
    messages: Sequence[Message],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Message]:
    """Messages created within ``[start, end]``; either bound may be open."""
    return [m for m in messages if _in_range(m, start, end)]


def search_messages(
    messages: Sequence[Message],
    query: str,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Message]:
    """Case-insensitive substring search, optionally restricted to a date range."""
    needle = query.lower()
    matches = [
        m for m in messages
        if m.text and needle in m.text.lower() and _in_range(m, start, end)
    ]
    logger.info(f"Found {len(matches)} messages matching query: {query!r}")
    return matches


def message_context(
    messages: Sequence[Message], message: Message, size: int = 2
) -> list[Message]:
    """``message`` plus up to ``size`` neighbours on each side, in original order."""
    for index, candidate in enumerate(messages):
        if candidate.id == message.id:
            break
    else:
        logger.warning(f"Message {message.id} not found in conversation")
        return [message]

    start = max(0, index - size)
    return list(messages[start:index + size + 1])
