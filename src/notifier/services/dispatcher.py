"""
Dispatcher

Routes outgoing messages to the registered transports.
"""
import logging
from typing import Dict, Optional

from ..exceptions import InvalidArgumentError, NoSupportingTransportError
from ..models.message import Message
from ..models.sent_message import SentMessage
from ..transports.base import AbstractTransport

logger = logging.getLogger("notifier.services.dispatcher")


class Dispatcher:
    """
    Message dispatcher.

    For each message:
    1. If the message names a transport, uses that one
    2. Otherwise walks transports in registration order
    3. Sends through the first one that supports the message
    No retries: a failed send is raised to the caller as is.
    """

    def __init__(self, transports: Optional[Dict[str, AbstractTransport]] = None):
        # name -> transport, in registration order
        self._transports: Dict[str, AbstractTransport] = dict(transports or {})

    def register_transport(self, name: str, transport: AbstractTransport):
        """Register a transport under a name"""
        if name in self._transports:
            raise InvalidArgumentError(f'Transport "{name}" is already registered.')
        self._transports[name] = transport
        logger.info(f"Registered transport {name}: {transport}")

    @property
    def transports(self) -> Dict[str, AbstractTransport]:
        return dict(self._transports)

    def supports(self, message: Message) -> bool:
        if message.transport is not None:
            transport = self._transports.get(message.transport)
            return transport is not None and transport.supports(message)
        return any(t.supports(message) for t in self._transports.values())

    def _select(self, message: Message) -> AbstractTransport:
        if message.transport is not None:
            transport = self._transports.get(message.transport)
            if transport is None:
                raise InvalidArgumentError(
                    f'The "{message.transport}" transport does not exist '
                    f'(available: "{", ".join(self._transports)}").'
                )
            return transport

        for transport in self._transports.values():
            if transport.supports(message):
                return transport

        raise NoSupportingTransportError(message)

    def send(self, message: Message) -> SentMessage:
        """
        Send a message through the matching transport.

        Raises:
            NoSupportingTransportError: no transport supports the message
            InvalidArgumentError: message names an unknown transport
            UnsupportedMessageTypeError: named transport does not support the message
            TransportError: provider call failed
        """
        transport = self._select(message)
        logger.debug(f"Dispatching {message.kind.value} message to {transport}")
        return transport.send(message)

    def close(self):
        """Cleanup transport resources"""
        for transport in self._transports.values():
            transport.close()

    def __str__(self) -> str:
        return "[" + ", ".join(str(t) for t in self._transports.values()) + "]"
