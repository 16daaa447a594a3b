"""Central configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from webex_summarizer.exceptions import ConfigError

# Saved conversations, override with WEBEX_SUMMARIZER_DATA_DIR
DEFAULT_DATA_DIR = "conversations"

DEFAULT_MODEL = "us.anthropic.claude-sonnet-4-20250514-v1:0"
DEFAULT_BACKEND = "bedrock"
DEFAULT_AWS_PROFILE = "default"
DEFAULT_AWS_REGION = "us-east-1"

BACKENDS = ("anthropic", "bedrock")


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings for the CLI."""

    webex_token: str | None
    data_dir: Path
    model: str
    backend: str
    aws_profile: str
    aws_region: str
    anthropic_api_key: str | None = None


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, then apply non-None overrides.

    Raises:
        ConfigError: if the backend is not one of ``BACKENDS``.
    """
    settings = Settings(
        webex_token=os.environ.get("WEBEX_TOKEN") or None,
        data_dir=Path(os.environ.get("WEBEX_SUMMARIZER_DATA_DIR", DEFAULT_DATA_DIR)),
        model=os.environ.get("WEBEX_SUMMARIZER_MODEL", DEFAULT_MODEL),
        backend=os.environ.get("WEBEX_SUMMARIZER_BACKEND", DEFAULT_BACKEND),
        aws_profile=os.environ.get("AWS_PROFILE", DEFAULT_AWS_PROFILE),
        aws_region=os.environ.get("AWS_REGION", DEFAULT_AWS_REGION),
        anthropic_api_key=os.environ.get("ANTHROPIC_API_KEY") or None,
    )

    changes = {key: value for key, value in overrides.items() if value is not None}
    if "data_dir" in changes:
        changes["data_dir"] = Path(changes["data_dir"])
    settings = replace(settings, **changes)

    if settings.backend not in BACKENDS:
        raise ConfigError(
            f"Unknown LLM backend: {settings.backend!r}. "
            f"Expected one of: {', '.join(BACKENDS)}"
        )
    return settings
