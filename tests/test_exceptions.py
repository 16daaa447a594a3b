"""Tests for exception hierarchy."""

from webex_summarizer.exceptions import (
    WebexSummarizerError,
    WebexError,
    WebexAuthError,
    WebexFetchError,
    StorageError,
    ConversationNotFoundError,
    LLMError,
    ConfigError,
)


def test_all_inherit_from_base():
    for exc_class in [
        WebexError, WebexAuthError, WebexFetchError,
        StorageError, ConversationNotFoundError,
        LLMError,
        ConfigError,
    ]:
        assert issubclass(exc_class, WebexSummarizerError)


def test_webex_hierarchy():
    assert issubclass(WebexAuthError, WebexError)
    assert issubclass(WebexFetchError, WebexError)


def test_storage_hierarchy():
    assert issubclass(ConversationNotFoundError, StorageError)


def test_catch_base():
    try:
        raise WebexFetchError("test")
    except WebexSummarizerError as e:
        assert str(e) == "test"
