"""Data models for Webex rooms, messages and downloaded conversations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from dateutil import parser as date_parser


def _parse_ts(value: str | None) -> datetime | None:
    """Parse an ISO 8601 API timestamp, assuming UTC when no offset is given."""
    if not value:
        return None
    parsed = date_parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_ts(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class Room:
    """A Webex room (space)."""

    id: str
    title: str
    type: str = ""  # "direct" or "group"
    created: datetime | None = None
    is_locked: bool | None = None
    last_activity: datetime | None = None

    @classmethod
    def from_api(cls, item: dict) -> Room:
        return cls(
            id=item["id"],
            title=item.get("title") or "(untitled)",
            type=item.get("type", ""),
            created=_parse_ts(item.get("created")),
            is_locked=item.get("isLocked"),
            last_activity=_parse_ts(item.get("lastActivity")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "created": _format_ts(self.created),
            "isLocked": self.is_locked,
            "lastActivity": _format_ts(self.last_activity),
        }


@dataclass(frozen=True)
class Message:
    """A single chat message. ``text`` is None for file-only messages."""

    id: str
    sender: str
    text: str | None
    created_at: datetime
    room_id: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> Message:
        return cls(
            id=item["id"],
            sender=item.get("personEmail") or "",
            text=item.get("text"),
            created_at=_parse_ts(item["created"]),
            room_id=item.get("roomId"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "roomId": self.room_id,
            "personEmail": self.sender,
            "text": self.text,
            "created": _format_ts(self.created_at),
        }


@dataclass
class Conversation:
    """A room together with its downloaded message history."""

    room: Room
    messages: list[Message] = field(default_factory=list)
    download_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    summary: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "room": self.room.to_dict(),
            "messages": [m.to_dict() for m in self.messages],
            "downloadDate": _format_ts(self.download_date),
            "summary": self.summary,
            "dateFrom": _format_ts(self.date_from),
            "dateTo": _format_ts(self.date_to),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Conversation:
        return cls(
            room=Room.from_api(data["room"]),
            messages=[Message.from_api(m) for m in data.get("messages", [])],
            download_date=_parse_ts(data.get("downloadDate")) or datetime.now(timezone.utc),
            summary=data.get("summary"),
            date_from=_parse_ts(data.get("dateFrom")),
            date_to=_parse_ts(data.get("dateTo")),
        )
