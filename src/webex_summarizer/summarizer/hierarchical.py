"""Map-reduce summarization and question answering over long conversations.

Conversations that fit in one request are sent as-is. Longer ones are split
into token-bounded chunks (see ``chunker.partition``); each chunk is summarized
(or searched for an answer) on its own, then the partial results are combined
in one final request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from webex_summarizer.exceptions import ConfigError
from webex_summarizer.llm.models import max_chunk_tokens_for
from webex_summarizer.summarizer import prompts
from webex_summarizer.summarizer.chunker import Chunk, partition
from webex_summarizer.summarizer.tokens import (
    CHARS_PER_TOKEN,
    MESSAGE_OVERHEAD_TOKENS,
    estimate_tokens,
)
from webex_summarizer.webex.models import Message

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]

DEFAULT_MAX_CHUNK_TOKENS = 50_000
DEFAULT_TOKEN_BUFFER = 2_000


class TextCompletionClient(Protocol):
    """Anything that turns a prompt into model output, e.g. ``LLMClient``."""

    def generate(self, prompt: str) -> str:
        ...


@dataclass(frozen=True)
class SummarizerConfig:
    """Token accounting for chunking.

    Attributes:
        chars_per_token: Characters assumed per token when estimating.
        message_overhead_tokens: Fixed tokens added per message for its metadata.
        max_chunk_tokens: Largest prompt the model family should receive.
        token_buffer: Safety margin kept free for instructions and the response.
    """

    chars_per_token: int = CHARS_PER_TOKEN
    message_overhead_tokens: int = MESSAGE_OVERHEAD_TOKENS
    max_chunk_tokens: int = DEFAULT_MAX_CHUNK_TOKENS
    token_buffer: int = DEFAULT_TOKEN_BUFFER

    def __post_init__(self):
        if self.chars_per_token <= 0:
            raise ConfigError("chars_per_token must be positive")
        if self.message_overhead_tokens < 0:
            raise ConfigError("message_overhead_tokens must not be negative")
        if self.chunk_budget <= 0:
            raise ConfigError(
                f"max_chunk_tokens ({self.max_chunk_tokens}) must exceed "
                f"token_buffer ({self.token_buffer})"
            )

    @property
    def chunk_budget(self) -> int:
        """Estimated tokens allowed in one chunk."""
        return self.max_chunk_tokens - self.token_buffer

    @classmethod
    def for_model(cls, model_id: str, **kwargs) -> SummarizerConfig:
        """Config using the per-family chunk limit of ``model_id``."""
        kwargs.setdefault("max_chunk_tokens", max_chunk_tokens_for(model_id))
        return cls(**kwargs)


class HierarchicalSummarizer:
    """Summarizes or answers questions about a conversation of any length.

    Processing is sequential on the caller's thread. Errors raised by the
    completion client propagate unchanged and abort the whole call.

    Args:
        client: Completion client with ``generate(prompt) -> str``.
        config: Token accounting; defaults to ``SummarizerConfig()``.
        on_progress: Default progress callback ``(current, total, status)``.
            A callback passed to ``summarize``/``answer`` takes precedence.
    """

    def __init__(
        self,
        client: TextCompletionClient,
        config: SummarizerConfig | None = None,
        on_progress: ProgressCallback | None = None,
    ):
        self.client = client
        self.config = config or SummarizerConfig()
        self.on_progress = on_progress

    def estimate(self, message: Message) -> int:
        return estimate_tokens(
            message,
            chars_per_token=self.config.chars_per_token,
            overhead=self.config.message_overhead_tokens,
        )

    def partition(self, messages: Sequence[Message]) -> list[Chunk]:
        chunks = partition(messages, self.config.chunk_budget, self.estimate)
        logger.debug(
            f"Split {len(messages)} messages into {len(chunks)} chunk(s) "
            f"(budget {self.config.chunk_budget} tokens)"
        )
        return chunks

    @staticmethod
    def is_irrelevant(result: str) -> bool:
        return prompts.NO_RELEVANT_INFO_MARKER.lower() in result.lower()

    def summarize(
        self,
        messages: Sequence[Message],
        room_label: str,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Summarize ``messages``; returns ``EMPTY_SUMMARY`` when there are none."""
        report = self._reporter(on_progress)
        if not messages:
            return prompts.EMPTY_SUMMARY

        chunks = self.partition(messages)
        if len(chunks) == 1:
            report(1, 1, "Processing full conversation")
            return self.client.generate(prompts.full_summary_prompt(messages, room_label))

        total_steps = len(chunks) + 1
        summaries: list[str] = []
        for part, chunk in enumerate(chunks, start=1):
            report(part, total_steps, f"Summarizing part {part} of {len(chunks)}")
            summaries.append(
                self.client.generate(
                    prompts.chunk_summary_prompt(
                        chunk.messages, room_label, part, len(chunks)
                    )
                )
            )

        report(total_steps, total_steps, "Combining part summaries")
        return self.client.generate(prompts.combine_summaries_prompt(summaries, room_label))

    def answer(
        self,
        messages: Sequence[Message],
        room_label: str,
        question: str,
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Answer ``question`` from ``messages`` only.

        Returns the insufficient-information template, without a final model
        call, when no part of the conversation is relevant.
        """
        report = self._reporter(on_progress)
        fallback = prompts.insufficient_information(question, room_label)
        if not messages:
            return fallback

        chunks = self.partition(messages)
        if len(chunks) == 1:
            report(1, 1, "Processing full conversation")
            result = self.client.generate(
                prompts.full_answer_prompt(messages, room_label, question)
            )
            return fallback if self.is_irrelevant(result) else result

        total_steps = len(chunks) + 1
        findings: list[tuple[int, str]] = []
        for part, chunk in enumerate(chunks, start=1):
            report(part, total_steps, f"Searching part {part} of {len(chunks)}")
            result = self.client.generate(
                prompts.chunk_answer_prompt(
                    chunk.messages, room_label, question, part, len(chunks)
                )
            )
            if self.is_irrelevant(result):
                logger.debug(f"Part {part} of {len(chunks)} has nothing relevant")
                continue
            findings.append((part, result))

        if not findings:
            report(total_steps, total_steps, "No relevant information found")
            return fallback

        report(total_steps, total_steps, "Combining findings")
        return self.client.generate(
            prompts.combine_answers_prompt(findings, room_label, question, len(chunks))
        )

    def _reporter(self, on_progress: ProgressCallback | None) -> ProgressCallback:
        callback = on_progress or self.on_progress
        if callback is None:
            return lambda current, total, status: None
        return callback
