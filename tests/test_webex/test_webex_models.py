"""Tests for Webex data models."""

from datetime import datetime, timezone

from webex_summarizer.webex.models import Conversation, Message, Room


def test_room_from_api_untitled():
    room = Room.from_api({"id": "r1"})
    assert room.title == "(untitled)"
    assert room.created is None


def test_message_from_api():
    message = Message.from_api({
        "id": "m1",
        "roomId": "r1",
        "personEmail": "john.doe@example.com",
        "created": "2025-05-26T14:03:00.000Z",
    })
    assert message.sender == "john.doe@example.com"
    assert message.text is None
    assert message.created_at == datetime(2025, 5, 26, 14, 3, tzinfo=timezone.utc)


def test_naive_timestamp_assumed_utc():
    message = Message.from_api({"id": "m1", "created": "2025-05-26T14:03:00"})
    assert message.created_at.tzinfo is not None
    assert message.created_at.utcoffset().total_seconds() == 0


def test_conversation_dict_keeps_fields():
    room = Room(id="r1", title="Team", type="group")
    message = Message(
        id="m1",
        sender="a@example.com",
        text="hello",
        created_at=datetime(2025, 5, 26, 9, 0, tzinfo=timezone.utc),
        room_id="r1",
    )
    conversation = Conversation(
        room=room,
        messages=[message],
        summary="**Overview**\nGreeting",
        date_from=datetime(2025, 5, 26, tzinfo=timezone.utc),
    )

    data = conversation.to_dict()
    assert data["room"]["title"] == "Team"
    assert data["messages"][0]["personEmail"] == "a@example.com"
    assert data["dateTo"] is None

    restored = Conversation.from_dict(data)
    assert restored.messages == [message]
    assert restored.room == room
    assert restored.summary == conversation.summary
    assert restored.date_from == conversation.date_from
