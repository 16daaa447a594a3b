"""Tests for terminal formatting."""

from datetime import datetime, timezone

from webex_summarizer.display.formatter import (
    display_name,
    format_answer,
    format_match,
    format_messages,
    format_summary,
    highlight,
    progress_bar,
)
from webex_summarizer.webex.models import Conversation, Message, Room


def _message(i, text, day=26):
    return Message(
        id=f"m{i}",
        sender="john.doe@example.com",
        text=text,
        created_at=datetime(2025, 5, day, 9, i, tzinfo=timezone.utc),
    )


def _conversation(messages):
    return Conversation(
        room=Room(id="r1", title="Team Sync"),
        messages=messages,
        download_date=datetime(2025, 5, 28, 8, 0, tzinfo=timezone.utc),
    )


def test_display_name():
    assert display_name("john.doe@example.com") == "John Doe"
    assert display_name("ops@example.com") == "Ops"
    assert display_name(None) == "Unknown sender"
    assert display_name("Webex Bot") == "Webex Bot"


def test_progress_bar():
    assert progress_bar(0, 4, "Starting", width=4) == "[>   ] 0/4 Starting"
    assert progress_bar(2, 4, "Halfway", width=4) == "[==> ] 2/4 Halfway"
    assert progress_bar(4, 4, "Done", width=4) == "[====] 4/4 Done"


def test_format_summary_sections_and_markers():
    summary = (
        "**Overview**\n"
        "The team planned the release.\n"
        "**Decisions**\n"
        "1. Ship on Friday\n"
        "**Action Items**\n"
        "1. Write release notes\n"
        "Owner: Jane\n"
        "---"
    )
    output = format_summary(summary, generated_at=datetime(2025, 5, 28, 10, 0))

    assert "CONVERSATION SUMMARY" in output
    assert "Generated: 2025-05-28 10:00:00" in output
    assert "┃  OVERVIEW  ┃" in output
    assert "  ✓ 1. Ship on Friday" in output
    assert "  ➤ 1. Write release notes" in output
    assert "      ↳ Owner: Jane" in output
    assert "    The team planned the release." in output
    assert output.rstrip().endswith("═" * 78)
    assert "Legend:" in output


def test_format_summary_empty():
    assert format_summary("") == ""


def test_format_answer():
    output = format_answer("Who?", "Jane.")
    assert "Question: Who?" in output
    assert "Answer:\n\nJane." in output


def test_highlight():
    assert highlight("Budget and budget", "budget") == "**Budget** and **budget**"
    assert highlight("a.b", ".") == "a**.**b"
    assert highlight("text", "") == "text"


def test_format_match_marks_hit():
    messages = [_message(1, "before"), _message(2, "the deadline moved"), _message(3, "after")]
    output = format_match(messages, messages[1], "deadline", 1, 3)

    assert "Match 1 of 3" in output
    assert ">> 2025-05-26 09:02:00 | John Doe" in output
    assert ">> the **deadline** moved" in output
    assert "   before" in output


def test_format_messages_groups_by_day():
    conversation = _conversation([_message(1, "hello", day=26), _message(2, "again", day=27)])
    output = format_messages(conversation)

    assert "Room: Team Sync" in output
    assert "Messages: 2 of 2 (Page 1 of 1)" in output
    assert "2025-05-26" in output and "2025-05-27" in output
    assert "#0001 [09:01:00] John Doe" in output
    assert "[ID: m2]" in output
    assert "Next page" not in output


def test_format_messages_pagination_and_no_references():
    conversation = _conversation([_message(i, f"msg {i}") for i in range(5)])
    output = format_messages(conversation, page=2, per_page=2, show_references=False)

    assert "Messages: 2 of 5 (Page 2 of 3)" in output
    assert "msg 2" in output and "msg 4" not in output
    assert "Previous page: --page 1" in output
    assert "Next page: --page 3" in output
    assert "[ID:" not in output
    assert "#0003" not in output


def test_format_messages_empty():
    output = format_messages(_conversation([]))
    assert "No messages found in this conversation." in output
