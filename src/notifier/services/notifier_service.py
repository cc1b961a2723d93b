"""
Notifier Service

Main composite service: builds transports from configuration and owns the dispatcher.
Singleton pattern - one instance per process.
"""
import logging
from typing import Dict, Optional

import httpx

from ..config import Config
from ..models.message import Message
from ..models.sent_message import SentMessage
from ..transports.factory import TransportFactory, default_factories
from .dispatcher import Dispatcher

logger = logging.getLogger("notifier.services.notifier")

# Singleton instance
_notifier_service: Optional["NotifierService"] = None


class NotifierService:
    """
    Composite notifier service.

    Manages:
    - One shared HTTP client for all transports
    - Transports built from NOTIFIER_TRANSPORTS
    - The dispatcher routing messages between them
    """

    def __init__(
        self,
        transport_dsns: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize notifier service.

        Args:
            transport_dsns: {name: dsn}; read from Config when not given
            client: HTTP client shared by transports; created when not given
        """
        if transport_dsns is None:
            transport_dsns = Config.get_transport_dsns()

        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=Config.HTTP_TIMEOUT)

        factories = default_factories(self.client)
        self.dispatcher = Dispatcher()
        try:
            for name, dsn in transport_dsns.items():
                transport = TransportFactory.from_string(dsn, factories=factories)
                self.dispatcher.register_transport(name, transport)
        except Exception as e:
            logger.error(f"Invalid transport configuration: {e}")
            if self._owns_client:
                self.client.close()
            raise

        if not transport_dsns:
            logger.warning("No transports configured (NOTIFIER_TRANSPORTS is empty)")

        logger.info(f"NotifierService created with transports {self.dispatcher}")

    def send(self, message: Message) -> SentMessage:
        """Send a message through the dispatcher"""
        return self.dispatcher.send(message)

    def close(self):
        """Close the shared HTTP client"""
        logger.info("Closing NotifierService...")
        self.dispatcher.close()
        if self._owns_client and not self.client.is_closed:
            self.client.close()
        logger.info("NotifierService closed")


def get_notifier_service() -> NotifierService:
    """Get or create notifier service singleton"""
    global _notifier_service
    if _notifier_service is None:
        _notifier_service = NotifierService()
    return _notifier_service


def init_notifier_service(service: Optional[NotifierService] = None) -> NotifierService:
    """Install (or create) the notifier service singleton"""
    global _notifier_service
    if service is not None:
        _notifier_service = service
    return get_notifier_service()


def close_notifier_service():
    """Close and forget the singleton"""
    global _notifier_service
    if _notifier_service is not None:
        _notifier_service.close()
        _notifier_service = None
