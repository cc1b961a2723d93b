"""
GatewayApi Transport

Sends SMS via the GatewayApi REST API using httpx.
"""
import logging
from typing import Optional

import httpx

from ..exceptions import TransportError
from ..models.message import Message, MessageKind
from ..models.sent_message import SentMessage
from .base import AbstractTransport, json_body

logger = logging.getLogger("notifier.transports.gatewayapi")


class GatewayApiTransport(AbstractTransport):
    """Send SMS via GatewayApi (POST /rest/mtsms, basic auth with the API token)"""

    HOST = "gatewayapi.com"

    def __init__(self, auth_token: str, sender: str, client: Optional[httpx.Client] = None):
        super().__init__(client)
        self.auth_token = auth_token
        self.sender = sender

    def __str__(self) -> str:
        return f"gatewayapi://{self.get_endpoint()}?from={self.sender}"

    def supports(self, message: Message) -> bool:
        return message.kind == MessageKind.SMS

    def _do_send(self, message: Message) -> SentMessage:
        endpoint = f"https://{self.get_endpoint()}/rest/mtsms"

        response = self._request(
            "POST",
            endpoint,
            auth=(self.auth_token, ""),
            json={
                "sender": self.sender,
                "recipients": [{"msisdn": message.phone}],
                "message": message.subject,
            },
        )

        if response.status_code != 200:
            description = json_body(response).get("message")
            logger.warning(
                f"GatewayApi rejected SMS: HTTP {response.status_code}"
                + (f" ({description})" if description else "")
            )
            raise TransportError(
                f"Unable to send the SMS: error {response.status_code}.",
                status_code=response.status_code,
                description=description,
                response=response,
            )

        ids = json_body(response).get("ids")
        message_id = str(ids[0]) if isinstance(ids, list) and ids else None

        logger.info(f"SMS sent via {self}, id={message_id}")
        return SentMessage(message, str(self), message_id)
