"""
Message Model

Generic outgoing message consumed by transports: an SMS or a chat message.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..exceptions import InvalidArgumentError
from .options import MessageOptions


class MessageKind(str, Enum):
    """Kind of outgoing message"""
    SMS = "sms"     # Text to a phone number
    CHAT = "chat"   # Text to a chat/channel


@dataclass(frozen=True)
class Message:
    """
    Outgoing message.

    Immutable once constructed; transports read it and never change it.
    - recipient: phone number for SMS, chat/channel id for chat messages
    - options: provider-specific options (e.g. TelegramOptions)
    - transport: name of the transport to route to, None lets the dispatcher pick
    """
    kind: MessageKind
    subject: str
    recipient: Optional[str] = None
    options: Optional[MessageOptions] = None
    transport: Optional[str] = None

    @classmethod
    def sms(cls, phone: str, subject: str) -> "Message":
        """Create an SMS message"""
        if not phone:
            raise InvalidArgumentError("An SMS message needs a phone number.")
        return cls(kind=MessageKind.SMS, subject=subject, recipient=phone)

    @classmethod
    def chat(cls, subject: str, options: Optional[MessageOptions] = None) -> "Message":
        """Create a chat message"""
        return cls(kind=MessageKind.CHAT, subject=subject, options=options)

    @property
    def phone(self) -> Optional[str]:
        return self.recipient if self.kind == MessageKind.SMS else None

    @property
    def recipient_id(self) -> Optional[str]:
        """Recipient from options if set, else the message recipient"""
        if self.options is not None and self.options.recipient_id:
            return self.options.recipient_id
        return self.recipient

    def with_transport(self, transport: Optional[str]) -> "Message":
        """Copy of this message routed to a named transport"""
        return replace(self, transport=transport)
