"""JSON file storage for downloaded conversations and their summaries."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from pathlib import Path

from webex_summarizer.exceptions import ConversationNotFoundError, StorageError
from webex_summarizer.webex.models import Conversation

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|]')


def sanitize_file_name(name: str) -> str:
    """Replace characters that are not allowed in file names."""
    return _UNSAFE_CHARS.sub("_", name).strip()


class ConversationStorage:
    """Stores one pretty-printed JSON file per downloaded conversation."""

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)
        if not self.directory.exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created storage directory: {self.directory}")

    def _write(self, path: Path, conversation: Conversation) -> None:
        try:
            path.write_text(
                json.dumps(conversation.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def save_conversation(self, conversation: Conversation) -> Path:
        """Write a new file named ``<title>_<room id>_<timestamp>.json``."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = (
            f"{sanitize_file_name(conversation.room.title)}_"
            f"{conversation.room.id}_{timestamp}.json"
        )
        path = self.directory / filename
        self._write(path, conversation)
        logger.info(f"Conversation saved to: {path}")
        return path

    def load_conversation(self, path: Path | str) -> Conversation:
        path = Path(path)
        if not path.exists():
            raise ConversationNotFoundError(f"File not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return Conversation.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise StorageError(f"Failed to load conversation from {path}: {e}") from e

    def list_conversation_files(self) -> list[Path]:
        return sorted(self.directory.glob("*.json"))

    def save_summary(self, conversation: Conversation, summary: str) -> Path:
        """Attach ``summary`` and overwrite the saved file for the same room.

        Falls back to writing a new file when the room has not been saved yet.
        """
        conversation.summary = summary
        for path in self.list_conversation_files():
            try:
                existing = self.load_conversation(path)
            except StorageError as e:
                logger.warning(f"Skipping unreadable conversation file {path.name}: {e}")
                continue
            if existing.room.id == conversation.room.id:
                self._write(path, conversation)
                logger.info(f"Updated conversation with summary: {path}")
                return path
        return self.save_conversation(conversation)
