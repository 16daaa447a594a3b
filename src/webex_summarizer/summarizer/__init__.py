"""Chunked, hierarchical summarization and question answering."""

from webex_summarizer.summarizer.chunker import Chunk, partition
from webex_summarizer.summarizer.hierarchical import (
    HierarchicalSummarizer,
    ProgressCallback,
    SummarizerConfig,
    TextCompletionClient,
)
from webex_summarizer.summarizer.prompts import EMPTY_SUMMARY, NO_RELEVANT_INFO_MARKER
from webex_summarizer.summarizer.tokens import estimate_tokens

__all__ = [
    "Chunk",
    "partition",
    "HierarchicalSummarizer",
    "ProgressCallback",
    "SummarizerConfig",
    "TextCompletionClient",
    "EMPTY_SUMMARY",
    "NO_RELEVANT_INFO_MARKER",
    "estimate_tokens",
]
