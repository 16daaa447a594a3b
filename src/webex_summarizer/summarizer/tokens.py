"""Approximate token counting for chat messages."""

from __future__ import annotations

import math

from webex_summarizer.webex.models import Message

# Roughly four characters per token for English text.
CHARS_PER_TOKEN = 4

# Rendered "Time:" and "From:" lines that accompany every message in a prompt.
MESSAGE_OVERHEAD_TOKENS = 20


def estimate_tokens(
    message: Message | str | None,
    chars_per_token: int = CHARS_PER_TOKEN,
    overhead: int = MESSAGE_OVERHEAD_TOKENS,
) -> int:
    """Estimate the prompt tokens a message (or bare message text) will use.

    ``ceil(len(text) / chars_per_token) + overhead``. Empty or missing text
    counts as overhead only. The estimate never decreases as text grows.
    """
    text = message.text if isinstance(message, Message) else message
    if not text:
        return overhead
    return math.ceil(len(text) / chars_per_token) + overhead
