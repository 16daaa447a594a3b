"""Download Webex room history and summarize or query it with an LLM."""

__version__ = "0.1.0"
