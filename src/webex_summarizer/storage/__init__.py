"""Local JSON storage for downloaded conversations."""

from webex_summarizer.storage.store import ConversationStorage, sanitize_file_name

__all__ = ["ConversationStorage", "sanitize_file_name"]
