"""
Notifier Data Models

Messages, provider options and send results.
"""
from .options import MessageOptions, TelegramOptions
from .message import Message, MessageKind
from .sent_message import SentMessage

__all__ = [
    'MessageOptions',
    'TelegramOptions',
    'Message',
    'MessageKind',
    'SentMessage',
]
