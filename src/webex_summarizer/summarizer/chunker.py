"""Split a conversation into contiguous, token-bounded chunks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from webex_summarizer.summarizer.tokens import estimate_tokens
from webex_summarizer.webex.models import Message


@dataclass(frozen=True)
class Chunk:
    """A contiguous run of messages sent to the model as one request."""

    messages: tuple[Message, ...]
    tokens: int

    def __len__(self) -> int:
        return len(self.messages)


def partition(
    messages: Sequence[Message],
    budget: int,
    estimate: Callable[[Message], int] = estimate_tokens,
) -> list[Chunk]:
    """Greedily pack messages, in order, into chunks of at most ``budget`` tokens.

    A message is never split: one whose own estimate exceeds ``budget`` ends up
    alone in its chunk. Concatenating the returned chunks reproduces
    ``messages`` exactly.
    """
    chunks: list[Chunk] = []
    current: list[Message] = []
    current_tokens = 0

    for message in messages:
        tokens = estimate(message)
        if current and current_tokens + tokens > budget:
            chunks.append(Chunk(tuple(current), current_tokens))
            current = []
            current_tokens = 0
        current.append(message)
        current_tokens += tokens

    if current:
        chunks.append(Chunk(tuple(current), current_tokens))

    return chunks
