"""
Sent Message Model

Result of a successful send.
"""
from dataclasses import dataclass
from typing import Optional

from .message import Message


@dataclass(frozen=True)
class SentMessage:
    """
    Confirmation of one successful delivery attempt.

    transport is the string form of the transport that sent it,
    message_id the identifier assigned by the provider (if it returned one).
    """
    original_message: Message
    transport: str
    message_id: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response"""
        return {
            "transport": self.transport,
            "message_id": self.message_id,
        }
