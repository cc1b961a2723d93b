"""
Base Transport

Abstract interface for provider bridges.
A transport turns a Message into one HTTP request and the response into a SentMessage.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from ..config import Config
from ..exceptions import TransportError, UnsupportedMessageTypeError
from ..models.message import Message
from ..models.sent_message import SentMessage

logger = logging.getLogger("notifier.transports")


class AbstractTransport(ABC):
    """
    Abstract provider transport.

    Subclasses define:
    - HOST: provider default host
    - supports(): which message kinds they handle
    - _do_send(): build the request, check the status, extract the provider id
    - __str__(): canonical DSN-like representation of the configuration
    """

    HOST = "localhost"

    def __init__(self, client: Optional[httpx.Client] = None):
        self._client = client
        self._owns_client = client is None
        self.host: Optional[str] = None
        self.port: Optional[int] = None

    def set_host(self, host: Optional[str]) -> "AbstractTransport":
        """Override the provider host (used against mock endpoints)"""
        self.host = host
        return self

    def set_port(self, port: Optional[int]) -> "AbstractTransport":
        self.port = port
        return self

    def get_endpoint(self) -> str:
        """Host (with port, if overridden) requests are sent to"""
        host = self.host or self.HOST
        if self.port:
            host += f":{self.port}"
        return host

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=Config.HTTP_TIMEOUT)
            self._owns_client = True
        return self._client

    @abstractmethod
    def supports(self, message: Message) -> bool:
        """Whether this transport can send the message"""
        ...

    def send(self, message: Message) -> SentMessage:
        """
        Send a message.

        Args:
            message: Message to send
        Returns:
            SentMessage carrying the provider message id
        Raises:
            UnsupportedMessageTypeError: message kind not handled; no HTTP call is made
            TransportError: provider rejected the message or was unreachable
        """
        if not self.supports(message):
            raise UnsupportedMessageTypeError(str(self), message)

        return self._do_send(message)

    @abstractmethod
    def _do_send(self, message: Message) -> SentMessage:
        ...

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue the single HTTP call of a send"""
        try:
            return self._get_client().request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{self}: request to provider failed: {e}")
            raise TransportError(
                f"Could not reach the provider: {e}"
            ) from e

    def close(self):
        """Close the HTTP client if this transport created it"""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    @abstractmethod
    def __str__(self) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractTransport):
            return NotImplemented
        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((type(self), str(self)))


def json_body(response: httpx.Response) -> dict:
    """Decode a JSON object body; anything else yields {}"""
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
