"""LLM client wrappers (Anthropic Claude, direct or via AWS Bedrock)."""

from webex_summarizer.llm.client import DEFAULT_SYSTEM_PROMPT, LLMClient
from webex_summarizer.llm.models import (
    KNOWN_MODELS,
    ModelInfo,
    list_models,
    max_chunk_tokens_for,
    model_details,
)

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "LLMClient",
    "KNOWN_MODELS",
    "ModelInfo",
    "list_models",
    "max_chunk_tokens_for",
    "model_details",
]
