"""Chat Store - Ordered message lists, one document per conversation."""

from __future__ import annotations

from pathlib import Path
from threading import Lock

from skillswap.models import Message
from skillswap.services.json_store import JsonDocument


def conversation_id(user_a: str, user_b: str) -> str:
    """Same id whichever side opens the chat."""
    return "_".join(sorted([user_a, user_b]))


class ChatStore:
    """Stores ``chat_<conversation id>.json`` files under a directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self._lock = Lock()

    def _document(self, user_a: str, user_b: str) -> JsonDocument:
        return JsonDocument(self.directory / f"chat_{conversation_id(user_a, user_b)}.json", "messages")

    def get_messages(self, user_a: str, user_b: str) -> list[Message]:
        """Messages between the two users, oldest first."""
        with self._lock:
            return self._document(user_a, user_b).load(Message.from_dict)

    def append(self, message: Message, *, conversation: tuple[str, str] | None = None) -> Message:
        """Append to the conversation between sender and receiver.

        AI suggestions are not sent by either participant, so they pass the
        ``conversation`` pair explicitly.
        """
        user_a, user_b = conversation or (message.sender_id, message.receiver_id)
        with self._lock:
            doc = self._document(user_a, user_b)
            messages = doc.load(Message.from_dict)
            messages.append(message)
            doc.save(messages)
        return message
