"""Claude text-completion client with retry logic (Anthropic API or AWS Bedrock)."""

from __future__ import annotations

import logging
import os
import time

from webex_summarizer.config import DEFAULT_AWS_PROFILE, DEFAULT_AWS_REGION, DEFAULT_MODEL
from webex_summarizer.exceptions import LLMError

logger = logging.getLogger(__name__)


DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant that summarizes WebEx conversations "
    "accurately and concisely."
)


class LLMClient:
    """Synchronous wrapper around the Anthropic SDK.

    Implements ``generate(prompt) -> str``, the text-completion contract the
    summarizer depends on. With ``backend="bedrock"`` requests go through
    ``AnthropicBedrock`` using the given AWS profile and region; otherwise an
    Anthropic API key is required.

    Args:
        api_key: Anthropic API key (``anthropic`` backend only).
        model: Model id, e.g. ``us.anthropic.claude-sonnet-4-20250514-v1:0``.
        max_retries: Attempts made on rate limits and timeouts.
        backend: ``"anthropic"`` or ``"bedrock"``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_retries: int = 3,
        backend: str = "anthropic",
        aws_profile: str | None = None,
        aws_region: str | None = None,
        max_tokens: int = 4096,
        temperature: float = 0.7,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ):
        if backend == "bedrock":
            try:
                from anthropic import AnthropicBedrock
            except ImportError:
                raise ImportError(
                    "anthropic is required for LLMClient. "
                    "Install with: pip install webex-summarizer[bedrock]"
                )
            self.aws_profile = aws_profile or DEFAULT_AWS_PROFILE
            self.aws_region = aws_region or DEFAULT_AWS_REGION
            self._client = AnthropicBedrock(
                aws_profile=self.aws_profile,
                aws_region=self.aws_region,
            )
            logger.info(
                f"Bedrock client initialized (profile: {self.aws_profile}, "
                f"region: {self.aws_region}, model: {model})"
            )
        elif backend == "anthropic":
            if not api_key and not os.environ.get("ANTHROPIC_API_KEY"):
                raise LLMError(
                    "Anthropic API key is required. "
                    "Pass it directly or set ANTHROPIC_API_KEY in your environment."
                )
            try:
                from anthropic import Anthropic
            except ImportError:
                raise ImportError(
                    "anthropic is required for LLMClient. "
                    "Install with: pip install webex-summarizer"
                )
            self._client = Anthropic(api_key=api_key or None)
        else:
            raise LLMError(f"Unsupported LLM backend: {backend}")

        self.backend = backend
        self.model = model
        self.max_retries = max_retries
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.system_prompt = system_prompt

    @property
    def client(self):
        """Access the underlying Anthropic SDK client for advanced usage."""
        return self._client

    def generate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
        model: str | None = None,
    ) -> str:
        """Send a single-turn prompt to Claude and return the response text.

        Raises:
            LLMError: on a non-retryable API error, or once retries run out.
        """
        from anthropic import APIError, APITimeoutError, RateLimitError

        use_model = model or self.model
        for attempt in range(self.max_retries):
            try:
                response = self._client.messages.create(
                    model=use_model,
                    max_tokens=max_tokens or self.max_tokens,
                    temperature=self.temperature if temperature is None else temperature,
                    system=system_prompt or self.system_prompt,
                    messages=[{"role": "user", "content": prompt}],
                )
                text = "".join(
                    block.text for block in response.content if block.type == "text"
                )
                logger.debug(
                    f"Completion from {use_model}: "
                    f"{response.usage.input_tokens} in / {response.usage.output_tokens} out"
                )
                return text
            except RateLimitError:
                wait = 2 ** (attempt + 1)
                logger.warning(f"Rate limited, retrying in {wait}s (attempt {attempt + 1})")
                time.sleep(wait)
            except APITimeoutError:
                wait = 2 ** attempt
                logger.warning(f"API timeout, retrying in {wait}s (attempt {attempt + 1})")
                time.sleep(wait)
            except APIError as e:
                raise LLMError(f"Claude API error: {e}") from e

        raise LLMError(f"Failed after {self.max_retries} retries")
