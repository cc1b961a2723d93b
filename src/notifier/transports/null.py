"""
Null Transport

Accepts every message and sends nothing. Useful for development and dry runs.
"""
import logging

from ..models.message import Message
from ..models.sent_message import SentMessage
from .base import AbstractTransport

logger = logging.getLogger("notifier.transports.null")


class NullTransport(AbstractTransport):
    """Transport that discards messages"""

    HOST = "null"

    def __str__(self) -> str:
        return "null://null"

    def supports(self, message: Message) -> bool:
        return True

    def _do_send(self, message: Message) -> SentMessage:
        logger.debug(f"Discarding {message.kind.value} message")
        return SentMessage(message, str(self))
