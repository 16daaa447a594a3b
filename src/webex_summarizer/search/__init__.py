"""Message search and date handling for saved conversations."""

from webex_summarizer.search.dates import (
    day_bounds,
    extract_date_from_question,
    parse_date_bound,
)
from webex_summarizer.search.messages import filter_by_date, message_context, search_messages

__all__ = [
    "day_bounds",
    "extract_date_from_question",
    "parse_date_bound",
    "filter_by_date",
    "message_context",
    "search_messages",
]
