"""Webex REST API client for rooms and message history."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterator

from webex_summarizer.exceptions import WebexAuthError, WebexError, WebexFetchError
from webex_summarizer.webex.models import Conversation, Message, Room

logger = logging.getLogger(__name__)

API_BASE_URL = "https://webexapis.com/v1"
MAX_MESSAGES_PER_REQUEST = 1000
MAX_ROOMS_PER_REQUEST = 1000


class WebexClient:
    """Token-authenticated Webex API client.

    Args:
        token: Personal or bot access token.
        base_url: API root, overridable for testing.
        timeout: Per-request timeout in seconds.
        transport: Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        token: str | None,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
        transport=None,
    ):
        if not token:
            raise WebexAuthError(
                "Webex access token is required. "
                "Pass it with --token or set WEBEX_TOKEN in your environment."
            )
        try:
            import httpx  # noqa: F401
        except ImportError:
            raise ImportError(
                "httpx is required for WebexClient. "
                "Install with: pip install webex-summarizer"
            )
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _http(self):
        import httpx

        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/json",
            },
            transport=self._transport,
        )

    @staticmethod
    def _check(response) -> None:
        if response.status_code in (401, 403):
            raise WebexAuthError(
                f"Webex rejected the access token (HTTP {response.status_code}). "
                "Tokens from developer.webex.com expire after 12 hours."
            )
        response.raise_for_status()

    @staticmethod
    def _next_link(response, data: dict) -> str | None:
        """Pagination URL from the ``Link`` header, falling back to ``links.next``."""
        link = response.links.get("next", {}).get("url")
        if link:
            return link
        return (data.get("links") or {}).get("next")

    def _paginate(self, path: str, params: dict[str, Any]) -> Iterator[dict]:
        """Yield every item across all pages of a list endpoint."""
        with self._http() as client:
            url: str | None = path
            page_params: dict[str, Any] | None = params
            while url:
                response = client.get(url, params=page_params)
                self._check(response)
                data = response.json()
                items = data.get("items", [])
                logger.info(f"Downloaded {len(items)} items from {path}")
                yield from items
                url = self._next_link(response, data)
                # The next link already carries the query string
                page_params = None

    def get_me(self) -> dict:
        """Details of the token owner; doubles as a token check."""
        try:
            with self._http() as client:
                response = client.get("/people/me")
                self._check(response)
                return response.json()
        except WebexError:
            raise
        except Exception as e:
            raise WebexFetchError(f"Failed to fetch token owner: {e}") from e

    def list_rooms(
        self,
        room_type: str | None = None,
        max_rooms: int = MAX_ROOMS_PER_REQUEST,
        sort_by: str = "lastactivity",
    ) -> list[Room]:
        """List rooms the token owner belongs to, most recently active first."""
        params: dict[str, Any] = {"max": max_rooms, "sortBy": sort_by}
        if room_type:
            params["type"] = room_type
        try:
            return [Room.from_api(item) for item in self._paginate("/rooms", params)]
        except WebexError:
            raise
        except Exception as e:
            raise WebexFetchError(f"Failed to list rooms: {e}") from e

    def get_room(self, room_id: str) -> Room:
        try:
            with self._http() as client:
                response = client.get(f"/rooms/{room_id}")
                self._check(response)
                return Room.from_api(response.json())
        except WebexError:
            raise
        except Exception as e:
            raise WebexFetchError(f"Failed to get room {room_id}: {e}") from e

    def list_messages(
        self,
        room_id: str,
        before: datetime | None = None,
        after: datetime | None = None,
        max_per_request: int = MAX_MESSAGES_PER_REQUEST,
    ) -> list[Message]:
        """Messages in a room, in API order (newest first).

        ``before`` is passed to the API; ``after`` stops paging at the first
        message older than it.
        """
        params: dict[str, Any] = {"roomId": room_id, "max": max_per_request}
        if before:
            params["before"] = before.isoformat()
        messages: list[Message] = []
        try:
            for item in self._paginate("/messages", params):
                message = Message.from_api(item)
                if after is not None and message.created_at < after:
                    break
                messages.append(message)
            return messages
        except WebexError:
            raise
        except Exception as e:
            raise WebexFetchError(f"Failed to list messages for room {room_id}: {e}") from e

    def download_conversation(
        self, room_id: str, after: datetime | None = None
    ) -> Conversation:
        """Fetch a room and its message history, optionally only since ``after``."""
        room = self.get_room(room_id)
        messages = self.list_messages(room_id, after=after)
        logger.info(f"Downloaded {len(messages)} messages from room {room.title!r}")
        return Conversation(room=room, messages=messages)
