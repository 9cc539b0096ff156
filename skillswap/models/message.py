"""Chat message and account data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .schema import require_mapping, require_number, require_str


@dataclass
class Message:
    """A single chat message between two neighbours (or from the AI advisor)."""
    id: str
    sender_id: str
    receiver_id: str
    text: str
    timestamp: int  # epoch milliseconds
    is_ai_suggestion: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "sender_id": self.sender_id,
            "receiver_id": self.receiver_id,
            "text": self.text,
            "timestamp": self.timestamp,
            "is_ai_suggestion": self.is_ai_suggestion,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Message":
        """Create from dictionary, validating every field."""
        data = require_mapping(data, "message")
        return cls(
            id=require_str(data, "id"),
            sender_id=require_str(data, "sender_id"),
            receiver_id=require_str(data, "receiver_id"),
            text=require_str(data, "text", allow_blank=True),
            timestamp=int(require_number(data, "timestamp")),
            is_ai_suggestion=bool(data.get("is_ai_suggestion", False)),
        )


@dataclass
class Account:
    """Login credentials for a user. The password is only ever kept hashed."""
    user_id: str
    email: str
    password_hash: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "password_hash": self.password_hash,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Account":
        data = require_mapping(data, "account")
        return cls(
            user_id=require_str(data, "user_id"),
            email=require_str(data, "email"),
            password_hash=require_str(data, "password_hash"),
        )
