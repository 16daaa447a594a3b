"""Known Claude model ids and per-family chunk limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelInfo:
    """A model the CLI can be pointed at."""

    id: str
    name: str
    provider: str


KNOWN_MODELS: list[ModelInfo] = [
    ModelInfo("us.anthropic.claude-sonnet-4-20250514-v1:0", "Claude Sonnet 4 (Latest)", "Anthropic"),
    ModelInfo("anthropic.claude-3-sonnet-20240229-v1:0", "Claude 3 Sonnet", "Anthropic"),
    ModelInfo("anthropic.claude-3-haiku-20240307-v1:0", "Claude 3 Haiku", "Anthropic"),
    ModelInfo("anthropic.claude-3-opus-20240229-v1:0", "Claude 3 Opus", "Anthropic"),
    ModelInfo("claude-sonnet-4-20250514", "Claude Sonnet 4 (Anthropic API)", "Anthropic"),
    ModelInfo("claude-haiku-4-5-20251001", "Claude Haiku 4.5 (Anthropic API)", "Anthropic"),
]

# Largest estimated prompt size sent per request, by model family.
MODEL_FAMILY_MAX_CHUNK_TOKENS: dict[str, int] = {
    "claude": 50_000,
    "titan": 8_000,
    "llama": 4_000,
}
DEFAULT_MAX_CHUNK_TOKENS = 50_000


def list_models() -> list[ModelInfo]:
    """Return the models known to work with the summarizer."""
    return list(KNOWN_MODELS)


def model_details(model_id: str) -> str:
    """Human-readable description of a model id."""
    for info in KNOWN_MODELS:
        if info.id == model_id:
            return (
                f"Model ID: {info.id}\n"
                f"Name:     {info.name}\n"
                f"Provider: {info.provider}\n"
                f"Max chunk tokens: {max_chunk_tokens_for(info.id):,}"
            )
    return (
        f"Model ID: {model_id}\n"
        "Note: Detailed model information not available for this model.\n"
        "Please check the AWS console or Anthropic documentation for more details."
    )


def max_chunk_tokens_for(model_id: str) -> int:
    """Per-request token limit for the family ``model_id`` belongs to."""
    lowered = model_id.lower()
    for family, limit in MODEL_FAMILY_MAX_CHUNK_TOKENS.items():
        if family in lowered:
            return limit
    return DEFAULT_MAX_CHUNK_TOKENS
