"""Webex rooms and message history over the REST API."""

from webex_summarizer.webex.client import API_BASE_URL, WebexClient
from webex_summarizer.webex.models import Conversation, Message, Room

__all__ = [
    "API_BASE_URL",
    "WebexClient",
    "Conversation",
    "Message",
    "Room",
]
