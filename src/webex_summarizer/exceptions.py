"""Unified exception hierarchy for webex-summarizer."""


class WebexSummarizerError(Exception):
    """Base exception for all webex-summarizer errors."""


# Webex
class WebexError(WebexSummarizerError):
    """Base exception for Webex API operations."""


class WebexAuthError(WebexError):
    """Missing, invalid or unauthorized Webex access token."""


class WebexFetchError(WebexError):
    """Failed to fetch rooms or messages from the Webex API."""


# Storage
class StorageError(WebexSummarizerError):
    """Failed to read or write a saved conversation."""


class ConversationNotFoundError(StorageError):
    """A saved conversation file does not exist."""


# LLM
class LLMError(WebexSummarizerError):
    """Base exception for LLM client operations."""


# Config
class ConfigError(WebexSummarizerError):
    """Invalid or missing configuration value."""
