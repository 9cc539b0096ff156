"""Chat Service - Messaging between neighbours and AI trade plans.

Interface Contract:
- send(sender, receiver_id, text) -> Message
- history(user_a, user_b) -> list[Message]
- request_trade_plan(me, other) -> Message
- send() raises ChatServiceError for blank text

Messages are only ever written by real users (and the trade advisor when
asked); there are no simulated replies.
"""

from __future__ import annotations

import logging
import time
import uuid

from skillswap.models import Message, Profile

logger = logging.getLogger(__name__)

AI_SENDER_ID = "ai"


class ChatServiceError(Exception):
    """Raised when a message cannot be sent."""
    pass


def now_ms() -> int:
    return int(time.time() * 1000)


class ChatService:
    """Service for conversations between two users."""

    def __init__(self, chat_store, trade_advisor=None):
        self.chat_store = chat_store
        self._trade_advisor = trade_advisor

    @property
    def trade_advisor(self):
        """Lazy load trade advisor."""
        if self._trade_advisor is None:
            from skillswap.services.trade_advisor import TradeAdvisor
            self._trade_advisor = TradeAdvisor()
        return self._trade_advisor

    def history(self, user_a: str, user_b: str) -> list[Message]:
        return self.chat_store.get_messages(user_a, user_b)

    def send(self, sender: Profile, receiver_id: str, text: str) -> Message:
        """Append a message from ``sender`` to the conversation.

        Raises:
            ChatServiceError: If the text is blank or not a string
        """
        if not isinstance(text, str) or not text.strip():
            raise ChatServiceError("Message text is required")
        ts = now_ms()
        message = Message(
            id=uuid.uuid4().hex,
            sender_id=sender.id,
            receiver_id=receiver_id,
            text=text,
            timestamp=ts,
        )
        return self.chat_store.append(message)

    def request_trade_plan(self, me: Profile, other: Profile) -> Message:
        """Ask the trade advisor for a proposal and post it in the chat."""
        suggestion = self.trade_advisor.suggest(me, other)
        ts = now_ms()
        message = Message(
            id=f"ai-{ts}",
            sender_id=AI_SENDER_ID,
            receiver_id=me.id,
            text=suggestion,
            timestamp=ts,
            is_ai_suggestion=True,
        )
        logger.info("[chat] trade plan for %s/%s", me.id, other.id)
        return self.chat_store.append(message, conversation=(me.id, other.id))
