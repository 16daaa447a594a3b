"""Terminal formatting helpers."""

from webex_summarizer.display.formatter import (
    display_name,
    format_answer,
    format_match,
    format_messages,
    format_summary,
    highlight,
    progress_bar,
)

__all__ = [
    "display_name",
    "format_answer",
    "format_match",
    "format_messages",
    "format_summary",
    "highlight",
    "progress_bar",
]
