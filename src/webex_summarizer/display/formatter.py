"""Plain-text rendering of summaries, answers and message listings for the terminal."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Sequence

from webex_summarizer.webex.models import Conversation, Message

WIDTH = 78
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

_NUMBERED = re.compile(r"^(\d+)\.\s*(.*)$")


def display_name(email: str | None) -> str:
    """``"john.doe@example.com"`` -> ``"John Doe"``."""
    if not email:
        return "Unknown sender"
    if "@" not in email:
        return email
    local = email.split("@", 1)[0].replace(".", " ")
    return " ".join(word[:1].upper() + word[1:] for word in local.split())


def progress_bar(current: int, total: int, status: str, width: int = 30) -> str:
    filled = int(current / total * width) if total else width
    bar = "".join(
        "=" if i < filled else ">" if i == filled else " " for i in range(width)
    )
    return f"[{bar}] {current}/{total} {status}"


def _header_decoration(header: str) -> str:
    lowered = header.lower()
    if "overview" in lowered:
        return "┅" * WIDTH
    if "action" in lowered or "task" in lowered:
        return "⬥" * WIDTH
    if "decision" in lowered or "conclusion" in lowered:
        return "◈" * WIDTH
    if "key" in lowered:
        return "▪" * WIDTH
    return "─" * WIDTH


def format_summary(summary: str, generated_at: datetime | None = None) -> str:
    """Boxed summary with section banners and action/decision markers."""
    if not summary:
        return ""
    generated = (generated_at or datetime.now()).strftime(f"{DATE_FORMAT} {TIME_FORMAT}")
    lines = [
        "╔" + "═" * WIDTH + "╗",
        "║" + "CONVERSATION SUMMARY".center(WIDTH) + "║",
        "╠" + "═" * WIDTH + "╣",
        "║" + f"  Generated: {generated}".ljust(WIDTH) + "║",
        "╚" + "═" * WIDTH + "╝",
    ]

    in_actions = in_decisions = False
    for line in summary.splitlines():
        stripped = line.strip()
        if not stripped:
            lines.append("")
        elif stripped.startswith("**") and stripped.endswith("**") and len(stripped) > 4:
            header = stripped.strip("*").strip()
            lowered = header.lower()
            in_actions = "action" in lowered or "task" in lowered
            in_decisions = "decision" in lowered or "conclusion" in lowered
            decoration = _header_decoration(header)
            lines += [
                "",
                decoration,
                "┏" + "━" * (len(header) + 4) + "┓",
                f"┃  {header.upper()}  ┃",
                "┗" + "━" * (len(header) + 4) + "┛",
                decoration,
            ]
        elif stripped.startswith("---"):
            lines.append("  " + "∙" * (WIDTH - 4))
        elif _NUMBERED.match(stripped):
            number, content = _NUMBERED.match(stripped).groups()
            marker = "➤" if in_actions else "✓" if in_decisions else "•"
            lines.append(f"  {marker} {number}. {content}")
        elif in_actions and any(key in stripped.lower() for key in ("by:", "owner:", "due:")):
            lines.append(f"      ↳ {stripped}")
        else:
            lines.append(f"    {line}")

    lines += [
        "",
        "═" * WIDTH,
        " Legend:  • Regular Point   ➤ Action Item   ✓ Decision",
        "═" * WIDTH,
    ]
    return "\n".join(lines)


def format_answer(question: str, answer: str) -> str:
    rule = "━" * WIDTH
    return f"\nQuestion: {question}\n{rule}\n\nAnswer:\n\n{answer}\n\n{rule}"


def highlight(text: str, query: str) -> str:
    """Wrap case-insensitive occurrences of ``query`` in ``**``."""
    if not query:
        return text
    return re.sub(re.escape(query), lambda m: f"**{m.group(0)}**", text, flags=re.IGNORECASE)


def format_match(
    context: Sequence[Message], match: Message, query: str, index: int, total: int
) -> str:
    """One search hit with its surrounding messages; the hit is prefixed ``>>``."""
    lines = [f"── Match {index} of {total} (with context) " + "─" * 40]
    for message in context:
        stamp = message.created_at.strftime(f"{DATE_FORMAT} {TIME_FORMAT}")
        sender = display_name(message.sender)
        is_match = message.id == match.id
        prefix = ">> " if is_match else "   "
        lines.append("")
        lines.append(f"{'>> ' if is_match else ''}{stamp} | {sender}")
        for text_line in (message.text or "").splitlines():
            lines.append(prefix + (highlight(text_line, query) if is_match else text_line))
    return "\n".join(lines)


def format_messages(
    conversation: Conversation,
    page: int = 1,
    per_page: int = 1000,
    show_references: bool = True,
) -> str:
    """Paginated listing of a conversation, grouped under a banner per day."""
    messages = conversation.messages
    total = len(messages)
    per_page = per_page if per_page > 0 else 1000
    total_pages = max(1, math.ceil(total / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    page_messages = messages[start:start + per_page]

    lines = [
        "╔" + "═" * WIDTH + "╗",
        "║" + "CONVERSATION MESSAGES".center(WIDTH) + "║",
        "╚" + "═" * WIDTH + "╝",
        f"Room: {conversation.room.title}",
        f"Messages: {len(page_messages)} of {total} (Page {page} of {total_pages})",
        f"Download Date: {conversation.download_date.strftime(f'{DATE_FORMAT} {TIME_FORMAT}')}",
    ]
    if total_pages > 1:
        lines += ["", "Navigation:"] + _navigation(page, total_pages)

    if not page_messages:
        lines += ["", "No messages found in this conversation."]
        return "\n".join(lines)

    current_day = None
    for offset, message in enumerate(page_messages):
        day = message.created_at.strftime(DATE_FORMAT)
        if day != current_day:
            current_day = day
            lines += ["", "┌" + "─" * WIDTH + "┐", "│ " + day.ljust(WIDTH - 1) + "│", "└" + "─" * WIDTH + "┘"]
        stamp = message.created_at.strftime(TIME_FORMAT)
        sender = display_name(message.sender)
        number = f"#{start + offset + 1:04d} " if show_references else ""
        lines += ["", f"{number}[{stamp}] {sender}"]
        lines += [f"    {text_line}" for text_line in (message.text or "").splitlines()]
        if show_references:
            lines.append(f"    [ID: {message.id}]")
        lines.append("─" * (WIDTH + 2))

    if total_pages > 1:
        lines += ["", f"Page {page} of {total_pages}"] + _navigation(page, total_pages)
    return "\n".join(lines)


def _navigation(page: int, total_pages: int) -> list[str]:
    nav = []
    if page > 1:
        nav.append(f"  Previous page: --page {page - 1}")
    if page < total_pages:
        nav.append(f"  Next page: --page {page + 1}")
    return nav
