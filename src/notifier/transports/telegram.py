"""
Telegram Transport

Sends chat messages via Telegram Bot API using httpx.
"""
import logging
from typing import Optional

import httpx

from ..exceptions import InvalidArgumentError, TransportError
from ..models.message import Message, MessageKind
from ..models.options import TelegramOptions
from ..models.sent_message import SentMessage
from .base import AbstractTransport, json_body

logger = logging.getLogger("notifier.transports.telegram")


class TelegramTransport(AbstractTransport):
    """
    Send messages via Telegram Bot API.

    chat_channel is the default chat; a chat id in the message options
    (or the message recipient) takes precedence for that message only.
    """

    HOST = "api.telegram.org"

    def __init__(self, token: str, chat_channel: Optional[str] = None, client: Optional[httpx.Client] = None):
        super().__init__(client)
        self.token = token
        self.chat_channel = chat_channel

    def __str__(self) -> str:
        if self.chat_channel is None:
            return f"telegram://{self.get_endpoint()}"
        return f"telegram://{self.get_endpoint()}?channel={self.chat_channel}"

    def supports(self, message: Message) -> bool:
        return message.kind == MessageKind.CHAT

    def _build_body(self, message: Message) -> dict:
        options = message.options.to_dict() if message.options is not None else {}
        options.pop("text", None)

        body = {
            "chat_id": options.pop("chat_id", None) or message.recipient_id or self.chat_channel,
            "text": message.subject,
            "parse_mode": options.pop("parse_mode", None) or TelegramOptions.PARSE_MODE_MARKDOWN_V2,
        }
        body.update(options)
        return body

    def _do_send(self, message: Message) -> SentMessage:
        endpoint = f"https://{self.get_endpoint()}/bot{self.token}/sendMessage"
        body = self._build_body(message)
        if not body["chat_id"]:
            raise InvalidArgumentError(
                f'The "{self}" transport has no default channel and the message names no chat.'
            )

        response = self._request("POST", endpoint, json=body)

        if response.status_code != 200:
            result = json_body(response)
            description = result.get("description")
            error_code = result.get("error_code", response.status_code)
            logger.warning(
                f"Telegram API error for chat_id={body['chat_id']}: "
                f"HTTP {response.status_code} {description}"
            )
            raise TransportError(
                f"Unable to post the Telegram message: {description} (code {error_code}).",
                status_code=response.status_code,
                description=description,
                response=response,
            )

        result = json_body(response).get("result")
        message_id = result.get("message_id") if isinstance(result, dict) else None
        if message_id is not None:
            message_id = str(message_id)

        logger.info(f"Telegram message sent to chat_id={body['chat_id']}, id={message_id}")
        return SentMessage(message, str(self), message_id)
